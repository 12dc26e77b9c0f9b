"""Sandboxed JSON document store.

The DocumentStore owns a single root directory and exposes read, write,
exclusive-create, and listing operations keyed by virtual paths. Every
operation resolves its path through the sandbox first; nothing is cached, so
each call sees the filesystem as it is right now.

Writes are whole-file overwrites with no locking: when two editors save the
same path, the last write wins.
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from models import sandbox
from models.document import DirectoryEntry, Document, blank_document
from models.errors import (
    AlreadyExistsError,
    PathNotADirectoryError,
    PathNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


class DocumentStore:
    """Read and write drawing documents under a fixed root directory.

    Attributes:
        root: The sandbox root all virtual paths resolve under.
    """

    def __init__(self, root: Path | str) -> None:
        """Initialize the store.

        Args:
            root: The sandbox root directory. It does not have to exist yet;
                reads of missing documents still return blank documents.
        """
        self.root = Path(os.path.abspath(os.fspath(root)))

    def resolve(self, virtual: str) -> Path:
        """Resolve a virtual path under this store's root."""
        return sandbox.resolve(self.root, virtual)

    # ===== Documents =====

    def read_or_default(self, virtual: str) -> Document:
        """Read a document, or return a blank one if no file exists.

        A missing file never gets created here.

        Args:
            virtual: Virtual path of the document.

        Returns:
            The stored document, or a fresh blank document.

        Raises:
            InvalidPathError: If the path escapes the root.
            StorageError: On any read failure other than "does not exist",
                or if the file does not hold a JSON object.
        """
        full = self.resolve(virtual)
        try:
            raw = full.read_bytes()
        except FileNotFoundError:
            return blank_document()
        except OSError as e:
            raise StorageError(
                f"Failed to read {virtual}: {e.strerror or e}",
                virtual_path=virtual,
                cause=e,
            ) from e

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(
                f"{virtual} is not valid JSON: {e}", virtual_path=virtual, cause=e
            ) from e

        return self._to_document(data, virtual)

    def write(self, virtual: str, document: Document) -> Path:
        """Overwrite a document, creating parent directories as needed.

        Args:
            virtual: Virtual path of the document.
            document: The document to persist. Any collaborators field in
                its app state is dropped before writing.

        Returns:
            The resolved path that was written.

        Raises:
            InvalidPathError: If the path escapes the root.
            StorageError: If directories or the file cannot be written.
        """
        full = self.resolve(virtual)
        content = self._serialize(document)
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            full.write_bytes(content)
        except OSError as e:
            raise StorageError(
                f"Failed to write {virtual}: {e.strerror or e}",
                virtual_path=virtual,
                cause=e,
            ) from e

        logger.info(f"Wrote {virtual} ({len(content)} bytes)")
        return full

    def create_exclusive(
        self, virtual: str, template: Document | None = None
    ) -> Path:
        """Create a new document only if nothing exists at the path yet.

        Args:
            virtual: Virtual path of the new document.
            template: Initial content; a blank document when omitted.

        Returns:
            The resolved path that was created.

        Raises:
            InvalidPathError: If the path escapes the root.
            AlreadyExistsError: If the target exists. The existing file is
                left untouched.
            StorageError: On any other write failure.
        """
        full = self.resolve(virtual)
        content = self._serialize(template if template is not None else blank_document())
        try:
            full.parent.mkdir(parents=True, exist_ok=True)
            with open(full, "xb") as fh:
                fh.write(content)
        except FileExistsError as e:
            raise AlreadyExistsError(
                f"File already exists: {virtual}", virtual_path=virtual
            ) from e
        except OSError as e:
            raise StorageError(
                f"Failed to create {virtual}: {e.strerror or e}",
                virtual_path=virtual,
                cause=e,
            ) from e

        logger.info(f"Created {virtual}")
        return full

    # ===== Directories =====

    def list(self, virtual_dir: str = "/") -> list[DirectoryEntry]:
        """List the immediate children of a directory.

        Directories come first, then files; each group sorted by
        case-insensitive name. Entries that disappear between the listing
        and the stat call are skipped.

        Args:
            virtual_dir: Virtual path of the directory.

        Returns:
            The directory entries.

        Raises:
            InvalidPathError: If the path escapes the root.
            PathNotFoundError: If the directory does not exist.
            PathNotADirectoryError: If the target is not a directory.
            StorageError: On any other failure.
        """
        full = self.resolve(virtual_dir)
        try:
            children = list(os.scandir(full))
        except FileNotFoundError as e:
            raise PathNotFoundError(
                f"No such directory: {virtual_dir}", virtual_path=virtual_dir
            ) from e
        except NotADirectoryError as e:
            raise PathNotADirectoryError(
                f"Not a directory: {virtual_dir}", virtual_path=virtual_dir
            ) from e
        except OSError as e:
            raise StorageError(
                f"Failed to list {virtual_dir}: {e.strerror or e}",
                virtual_path=virtual_dir,
                cause=e,
            ) from e

        entries = []
        for child in children:
            try:
                st = child.stat()
                is_dir = child.is_dir()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise StorageError(
                    f"Failed to stat {child.name}: {e.strerror or e}",
                    virtual_path=virtual_dir,
                    cause=e,
                ) from e
            entries.append(
                DirectoryEntry(
                    name=child.name,
                    is_dir=is_dir,
                    size=st.st_size,
                    mtime=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
                )
            )

        entries.sort(key=lambda e: (not e.is_dir, e.name.lower(), e.name))
        return entries

    # ===== Helpers =====

    @staticmethod
    def _serialize(document: Document) -> bytes:
        payload = document.without_collaborators().to_json_dict()
        return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")

    @staticmethod
    def _to_document(data: Any, virtual: str) -> Document:
        if not isinstance(data, dict):
            raise StorageError(
                f"{virtual} does not contain a drawing document",
                virtual_path=virtual,
            )
        try:
            return Document.model_validate(data)
        except ValidationError as e:
            raise StorageError(
                f"{virtual} does not contain a drawing document: {e.error_count()} invalid field(s)",
                virtual_path=virtual,
                cause=e,
            ) from e
