"""Error taxonomy for the document store.

Every failure raised by the sandbox or the store derives from StoreError so
the HTTP layer can map the whole family with a handful of exception handlers.

Exception Hierarchy:
    StoreError (base)
    ├── InvalidPathError - Relative, malformed, or root-escaping virtual path
    ├── PathNotFoundError - Listing a directory that does not exist
    ├── PathNotADirectoryError - Listing something that is not a directory
    ├── AlreadyExistsError - Exclusive create hit an existing file
    └── StorageError - Any other filesystem or decoding failure
"""


class StoreError(Exception):
    """Base exception for all document store errors.

    Attributes:
        message: Human-readable error description.
        virtual_path: The virtual path the operation was called with, if any.
    """

    def __init__(self, message: str, virtual_path: str | None = None) -> None:
        self.message = message
        self.virtual_path = virtual_path
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidPathError(StoreError):
    """Raised when a virtual path is relative or resolves outside the root."""


class PathNotFoundError(StoreError):
    """Raised when a directory to be listed does not exist."""


class PathNotADirectoryError(StoreError):
    """Raised when a listing target exists but is not a directory."""


class AlreadyExistsError(StoreError):
    """Raised by exclusive create when the target file already exists."""


class StorageError(StoreError):
    """Raised for any other I/O or decoding failure.

    Attributes:
        cause: The underlying exception, when there is one.
    """

    def __init__(
        self,
        message: str,
        virtual_path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message, virtual_path=virtual_path)
