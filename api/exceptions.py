"""Exception handlers for the drawing store FastAPI application.

This module converts store exceptions into plain-text error responses. The
body of every error response is the error message itself, which is what the
editor shows to the user.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.utils import allowed_methods
from models.errors import (
    AlreadyExistsError,
    InvalidPathError,
    PathNotADirectoryError,
    PathNotFoundError,
    StorageError,
    StoreError,
)

logger = logging.getLogger(__name__)


# Status codes for each store error; subclasses not listed fall back to 500
_STATUS_BY_ERROR: dict[type[StoreError], int] = {
    InvalidPathError: status.HTTP_400_BAD_REQUEST,
    PathNotFoundError: status.HTTP_404_NOT_FOUND,
    PathNotADirectoryError: status.HTTP_400_BAD_REQUEST,
    AlreadyExistsError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_error(exc: StoreError) -> int:
    """Return the HTTP status code a store error maps to.

    Args:
        exc: The store error.

    Returns:
        The status code for the most specific matching error class.
    """
    for cls in type(exc).__mro__:
        if cls in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def store_error_handler(request: Request, exc: StoreError):
    """Handle every StoreError subclass.

    Client errors (bad path, missing directory, create collision) come back
    with their 4xx code; storage failures come back as 500. The body is the
    error message as plain text.

    Args:
        request: The incoming request that triggered the error.
        exc: The StoreError exception.

    Returns:
        PlainTextResponse with the mapped status code.
    """
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse(exc.message, status_code=status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTPExceptions as plain text, keeping their headers.

    A 405 advertises in ``Allow`` every method any route for the path
    accepts, whatever method was tried.

    Args:
        request: The incoming request that triggered the error.
        exc: The HTTPException.

    Returns:
        PlainTextResponse with the exception's status and headers.
    """
    headers = dict(getattr(exc, "headers", None) or {})
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allowed = allowed_methods(request.app.routes, request.url.path)
        if allowed:
            headers["Allow"] = ", ".join(allowed)
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=headers or None,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as a 400 plain-text message.

    Args:
        request: The incoming request that triggered the error.
        exc: The RequestValidationError.

    Returns:
        PlainTextResponse naming the first invalid field.
    """
    errors = exc.errors()
    if not errors:
        return PlainTextResponse("Invalid request", status_code=status.HTTP_400_BAD_REQUEST)
    first = errors[0]
    loc = first.get("loc") or ()
    field = loc[-1] if loc else "request"
    message = first.get("msg", "invalid value")
    return PlainTextResponse(
        f"{field}: {message}",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    This is a catch-all handler for unexpected errors. It logs the
    traceback and keeps it out of the response.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        PlainTextResponse with a generic 500 message.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return PlainTextResponse(
        str(exc) or "Server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
