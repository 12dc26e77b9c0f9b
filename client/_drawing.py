"""Drawing document sub-client for the drawing store API.

This module provides DrawingClient and AsyncDrawingClient for the document
resource (/api/drawing).

This is an internal module. Import from `client` instead.
"""

from typing import Any

from client._base import AsyncBaseClient, BaseClient
from client.models import Document, OkResponse


def _payload(document: Document | dict[str, Any] | None) -> Any:
    if isinstance(document, Document):
        return document.to_json_dict()
    return document


class DrawingClient(BaseClient):
    """Synchronous client for the document resource (/api/drawing).

    Documents come back as plain JSON dicts. The app state may hold fields
    in whatever shape they were stored in; run the result through
    ``client.sanitize`` before handing it to a canvas.

    Example:
        with StoreClient() as client:
            doc = client.drawing.get("/team/plan.excalidraw")
            doc["elements"].append({"id": "a1", "type": "rectangle"})
            client.drawing.put("/team/plan.excalidraw", doc)
    """

    _BASE_PATH = "/api/drawing"

    def get(self, path: str) -> dict[str, Any]:
        """Read a drawing, or the blank document if none is stored.

        Args:
            path: Absolute virtual path of the drawing.

        Returns:
            The document as a JSON dict.

        Raises:
            BadRequestError: If the path is relative or escapes the root.
            ServerError: If the store cannot read the file.
        """
        data = self._get(self._BASE_PATH, params={"path": path})
        return data["data"]

    def put(
        self, path: str, document: Document | dict[str, Any] | None = None
    ) -> OkResponse:
        """Overwrite a drawing.

        Args:
            path: Absolute virtual path of the drawing.
            document: The document to store; None stores the blank document.

        Returns:
            The acknowledgement.

        Raises:
            BadRequestError: If the path or body is rejected.
            ServerError: If the store cannot write the file.
        """
        data = self._put(self._BASE_PATH, json=_payload(document), params={"path": path})
        return OkResponse(**data)


class AsyncDrawingClient(AsyncBaseClient):
    """Asynchronous client for the document resource (/api/drawing).

    Example:
        async with AsyncStoreClient() as client:
            doc = await client.drawing.get("/team/plan.excalidraw")
    """

    _BASE_PATH = "/api/drawing"

    async def get(self, path: str) -> dict[str, Any]:
        """Read a drawing, or the blank document if none is stored.

        Args:
            path: Absolute virtual path of the drawing.

        Returns:
            The document as a JSON dict.
        """
        data = await self._get(self._BASE_PATH, params={"path": path})
        return data["data"]

    async def put(
        self, path: str, document: Document | dict[str, Any] | None = None
    ) -> OkResponse:
        """Overwrite a drawing.

        Args:
            path: Absolute virtual path of the drawing.
            document: The document to store; None stores the blank document.

        Returns:
            The acknowledgement.
        """
        data = await self._put(
            self._BASE_PATH, json=_payload(document), params={"path": path}
        )
        return OkResponse(**data)
