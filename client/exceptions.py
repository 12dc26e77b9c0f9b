"""Exception hierarchy for the drawing store client.

Exception Hierarchy:
    DrawingClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── BadRequestError (HTTP 400)
        ├── NotFoundError (HTTP 404)
        ├── ConflictError (HTTP 409)
        ├── ValidationError (HTTP 422)
        └── ServerError (HTTP 5xx)

Example:
    Creating a file that may already exist::

        try:
            client.files.create("/team/plan.excalidraw")
        except ConflictError as e:
            print(f"Already there: {e.message}")
"""

from typing import Any


class DrawingClientError(Exception):
    """Base exception for all drawing store client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(DrawingClientError):
    """Failed to connect to the drawing store server.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(DrawingClientError):
    """Request timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        if self.timeout is not None:
            return f"{self.message} (timeout: {self.timeout}s)"
        return self.message


class APIError(DrawingClientError):
    """Server returned an error response.

    The store answers errors with the message as plain text, so ``message``
    is usually exactly what should be shown to the user.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        details: Structured error details, when the body was JSON.
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        return f"[HTTP {self.status_code}] {self.message}"


class BadRequestError(APIError):
    """Request rejected as malformed (HTTP 400), e.g. a relative or escaping path."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, 400, details=details, response_body=response_body)


class NotFoundError(APIError):
    """Directory not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, 404, details=details, response_body=response_body)


class ConflictError(APIError):
    """Target already exists (HTTP 409)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, 409, details=details, response_body=response_body)


class ValidationError(APIError):
    """Request body failed schema validation (HTTP 422)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, 422, details=details, response_body=response_body)


class ServerError(APIError):
    """Server-side failure (HTTP 5xx), e.g. a storage I/O error."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message, status_code, details=details, response_body=response_body
        )
