"""Directory sub-client for the drawing store API.

This module provides FilesClient and AsyncFilesClient for the directory
resource (/api/files).

This is an internal module. Import from `client` instead.
"""

from typing import Any

from client._base import AsyncBaseClient, BaseClient
from client.models import DirectoryEntry, Document, OkResponse


def _create_body(path: str, template: Document | dict[str, Any] | None) -> dict[str, Any]:
    body: dict[str, Any] = {"path": path}
    if isinstance(template, Document):
        body["template"] = template.to_json_dict()
    elif template is not None:
        body["template"] = template
    return body


class FilesClient(BaseClient):
    """Synchronous client for the directory resource (/api/files).

    Example:
        with StoreClient() as client:
            client.files.create("/team/plan.excalidraw")
            for entry in client.files.list("/team"):
                print(entry.name, entry.is_dir, entry.size)
    """

    _BASE_PATH = "/api/files"

    def list(self, dir: str = "/") -> list[DirectoryEntry]:
        """List the immediate children of a directory.

        Args:
            dir: Absolute virtual path of the directory.

        Returns:
            Entries, directories first.

        Raises:
            NotFoundError: If the directory does not exist.
            BadRequestError: If the path is invalid or not a directory.
        """
        data = self._get(self._BASE_PATH, params={"dir": dir})
        return [DirectoryEntry.model_validate(item) for item in data]

    def create(
        self, path: str, template: Document | dict[str, Any] | None = None
    ) -> OkResponse:
        """Create a new drawing that must not exist yet.

        Args:
            path: Absolute virtual path of the new file.
            template: Initial content; the server uses a blank document
                when omitted.

        Returns:
            The acknowledgement.

        Raises:
            ConflictError: If something already exists at the path.
            BadRequestError: If the path is missing or invalid.
        """
        data = self._post(self._BASE_PATH, json=_create_body(path, template))
        return OkResponse(**data)


class AsyncFilesClient(AsyncBaseClient):
    """Asynchronous client for the directory resource (/api/files)."""

    _BASE_PATH = "/api/files"

    async def list(self, dir: str = "/") -> list[DirectoryEntry]:
        """List the immediate children of a directory.

        Args:
            dir: Absolute virtual path of the directory.

        Returns:
            Entries, directories first.
        """
        data = await self._get(self._BASE_PATH, params={"dir": dir})
        return [DirectoryEntry.model_validate(item) for item in data]

    async def create(
        self, path: str, template: Document | dict[str, Any] | None = None
    ) -> OkResponse:
        """Create a new drawing that must not exist yet.

        Args:
            path: Absolute virtual path of the new file.
            template: Initial content; blank when omitted.

        Returns:
            The acknowledgement.
        """
        data = await self._post(self._BASE_PATH, json=_create_body(path, template))
        return OkResponse(**data)
