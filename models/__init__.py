"""Drawing store data models package.

This package contains the server-side core: the document models, the path
sandbox, the store error taxonomy, and the DocumentStore itself.
"""

from models.document import DirectoryEntry, Document, blank_document
from models.errors import (
    AlreadyExistsError,
    InvalidPathError,
    PathNotADirectoryError,
    PathNotFoundError,
    StorageError,
    StoreError,
)
from models.sandbox import resolve
from models.store import DocumentStore

__all__ = [
    "Document",
    "DirectoryEntry",
    "blank_document",
    "DocumentStore",
    "resolve",
    "StoreError",
    "InvalidPathError",
    "PathNotFoundError",
    "PathNotADirectoryError",
    "AlreadyExistsError",
    "StorageError",
]
