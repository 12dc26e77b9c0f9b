"""Main entry point for the drawing store FastAPI application.

This module creates and configures the FastAPI app instance that serves the
document and directory resources the drawing editor saves to and loads from.

To run the development server:
    uvicorn main:app --reload

To run in production:
    DRAWINGS_ROOT=/srv/excalidraw/drawings uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies import initialize_document_store, shutdown_document_store
from api.exceptions import (
    generic_exception_handler,
    http_exception_handler,
    store_error_handler,
    validation_exception_handler,
)
from api.routes import drawing as drawing_routes
from api.routes import files as files_routes
from api.settings import load_settings
from models.errors import StoreError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Builds the shared DocumentStore from the environment at startup and
    releases it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting drawing store")
    initialize_document_store(settings)

    yield

    logger.info("Shutting down drawing store")
    shutdown_document_store()


app = FastAPI(
    title="Drawing Store",
    description="Sandboxed JSON storage for browser-edited drawings",
    version=VERSION,
    lifespan=lifespan,
)

# Register exception handlers
# Store errors carry their own status; anything else is a generic 500
app.add_exception_handler(StoreError, store_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register route modules
app.include_router(drawing_routes.router)
app.include_router(files_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns service information."""
    return {
        "message": "Drawing Store API",
        "version": VERSION,
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
