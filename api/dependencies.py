"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to shared resources like the DocumentStore.
"""

import logging
from typing import Annotated

from fastapi import Depends

from api.settings import Settings, load_settings
from models.store import DocumentStore

logger = logging.getLogger(__name__)


# Global state
# The store holds no mutable state beyond its root, so one shared instance
# serves every request.
_document_store: DocumentStore | None = None


def get_document_store() -> DocumentStore:
    """Get the shared DocumentStore instance.

    This function is a FastAPI dependency. Tests replace it through
    ``app.dependency_overrides`` to point the API at a temporary root.

    Returns:
        The shared DocumentStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.
    """
    if _document_store is None:
        raise RuntimeError(
            "DocumentStore not initialized. Call initialize_document_store() first."
        )

    return _document_store


def initialize_document_store(settings: Settings | None = None) -> DocumentStore:
    """Initialize the shared DocumentStore instance.

    This should be called once when the FastAPI app starts up.

    Args:
        settings: Settings to build the store from. Loaded from the
            environment when omitted.

    Returns:
        The newly created DocumentStore instance.
    """
    global _document_store

    if settings is None:
        settings = load_settings()

    if settings.create_root:
        settings.drawings_root.mkdir(parents=True, exist_ok=True)

    _document_store = DocumentStore(settings.drawings_root)
    logger.info(f"Serving drawings from {_document_store.root}")
    return _document_store


def shutdown_document_store() -> None:
    """Release the shared DocumentStore instance."""
    global _document_store
    _document_store = None


# Type alias for dependency injection
DocumentStoreDep = Annotated[DocumentStore, Depends(get_document_store)]
