"""Drawing store client library.

This package provides a typed Python client for the drawing store REST API,
plus the editor-side save machinery built on it.

Example:
    Synchronous usage::

        from client import StoreClient

        with StoreClient(base_url="http://localhost:8000") as client:
            client.files.create("/team/plan.excalidraw")
            doc = client.drawing.get("/team/plan.excalidraw")

    Editor usage::

        from client import AsyncStoreClient, SaveCoordinator

        async with AsyncStoreClient() as client:
            coordinator = SaveCoordinator(client, "/team/plan.excalidraw")
            initial = await coordinator.load()
            coordinator.attach(canvas)
            canvas.on_change(coordinator.on_canvas_change)

Exports:
    StoreClient, AsyncStoreClient: Clients for the REST API.
    SaveCoordinator, SaveState, Canvas, KeyEvent: Save coordination.
    sanitize: Load-time document normalization.

    Exceptions:
        DrawingClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        BadRequestError: Invalid path or body (HTTP 400).
        NotFoundError: Directory not found (HTTP 404).
        ConflictError: File already exists (HTTP 409).
        ValidationError: Request validation failed (HTTP 422).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._drawing import AsyncDrawingClient, DrawingClient
from client._files import AsyncFilesClient, FilesClient
from client.browser import (
    breadcrumbs,
    create_drawing,
    create_drawing_async,
    ensure_extension,
    filter_entries,
    join_path,
    sort_entries,
)
from client.client import AsyncStoreClient, StoreClient
from client.coordinator import (
    Canvas,
    KeyEvent,
    SaveCoordinator,
    SaveState,
    is_save_shortcut,
)
from client.exceptions import (
    APIError,
    BadRequestError,
    ConflictError,
    ConnectionError,
    DrawingClientError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from client.models import DirectoryEntry, Document, OkResponse, blank_document
from client.sanitizer import sanitize
from client.timer import DebounceTimer

__all__ = [
    # Clients
    "StoreClient",
    "AsyncStoreClient",
    "DrawingClient",
    "AsyncDrawingClient",
    "FilesClient",
    "AsyncFilesClient",
    # Save coordination
    "SaveCoordinator",
    "SaveState",
    "Canvas",
    "KeyEvent",
    "is_save_shortcut",
    "DebounceTimer",
    "sanitize",
    # File browsing
    "breadcrumbs",
    "create_drawing",
    "create_drawing_async",
    "ensure_extension",
    "filter_entries",
    "join_path",
    "sort_entries",
    # Models
    "DirectoryEntry",
    "Document",
    "OkResponse",
    "blank_document",
    # Exceptions
    "DrawingClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "ServerError",
]
