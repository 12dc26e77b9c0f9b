"""Main drawing store client classes.

This module provides the main entry points for talking to the store API:
- StoreClient: Synchronous client
- AsyncStoreClient: Asynchronous client (used by the SaveCoordinator)

Both expose the two resources as sub-client properties, ``drawing`` and
``files``.

Example:
    Synchronous usage::

        from client import StoreClient

        with StoreClient(base_url="http://localhost:8000") as client:
            client.files.create("/team/plan.excalidraw")
            doc = client.drawing.get("/team/plan.excalidraw")

    Asynchronous usage::

        from client import AsyncStoreClient

        async with AsyncStoreClient() as client:
            entries = await client.files.list("/team")
"""

from typing import Any

from client._drawing import AsyncDrawingClient, DrawingClient
from client._files import AsyncFilesClient, FilesClient
from client._http import AsyncHTTPClient, HTTPClient


class StoreClient:
    """Synchronous client for the drawing store API.

    Attributes:
        base_url: The base URL of the store server.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the store server.
            timeout: Request timeout in seconds.
            retry_enabled: Retry connection errors, timeouts, and HTTP
                502/503/504 with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g., for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self._drawing: DrawingClient | None = None
        self._files: FilesClient | None = None

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    def __enter__(self) -> "StoreClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def drawing(self) -> DrawingClient:
        """Access the document resource (/api/drawing)."""
        if self._drawing is None:
            self._drawing = DrawingClient(self._http)
        return self._drawing

    @property
    def files(self) -> FilesClient:
        """Access the directory resource (/api/files)."""
        if self._files is None:
            self._files = FilesClient(self._http)
        return self._files


class AsyncStoreClient:
    """Asynchronous client for the drawing store API.

    Attributes:
        base_url: The base URL of the store server.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the async client.

        Args:
            base_url: The base URL of the store server.
            timeout: Request timeout in seconds.
            retry_enabled: Retry connection errors, timeouts, and HTTP
                502/503/504 with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
        """
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self._drawing: AsyncDrawingClient | None = None
        self._files: AsyncFilesClient | None = None

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    async def __aenter__(self) -> "AsyncStoreClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    @property
    def drawing(self) -> AsyncDrawingClient:
        """Access the document resource (/api/drawing)."""
        if self._drawing is None:
            self._drawing = AsyncDrawingClient(self._http)
        return self._drawing

    @property
    def files(self) -> AsyncFilesClient:
        """Access the directory resource (/api/files)."""
        if self._files is None:
            self._files = AsyncFilesClient(self._http)
        return self._files
