"""Internal HTTP handling utilities for the drawing store client.

This module provides the low-level HTTP communication layer used by all
sub-clients. It handles:
- Making HTTP requests (sync and async)
- Mapping error responses to exceptions
- Optional retry with exponential backoff on gateway errors

This is an internal module and should not be imported directly by users.
"""

import asyncio
import logging
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    BadRequestError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# HTTP methods supported by the client
HttpMethod = Literal["GET", "POST", "PUT"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

# Default backoff settings for retry logic
DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, dict | None]:
    """Extract a message and optional details from an error response.

    The store answers with plain-text messages. FastAPI's own validation
    errors arrive as JSON with a ``detail`` list, which is flattened into
    one message.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, details).
    """
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            detail = body.get("detail")
            if isinstance(detail, str):
                return detail, None
            if isinstance(detail, list):
                messages = [
                    f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
                    for err in detail
                    if isinstance(err, dict)
                ]
                return "; ".join(messages), {"errors": detail}
            if "message" in body:
                return str(body["message"]), body.get("details")

    text = response.text.strip()
    if text:
        return text, None
    return f"HTTP {response.status_code} error", None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception for error status codes.

    Args:
        response: The HTTP response to check.

    Raises:
        BadRequestError: For HTTP 400 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ValidationError: For HTTP 422 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, details = _parse_error_response(response)
    status_code = response.status_code
    response_body = response.text

    if status_code == 400:
        raise BadRequestError(message, details=details, response_body=response_body)
    elif status_code == 404:
        raise NotFoundError(message, details=details, response_body=response_body)
    elif status_code == 409:
        raise ConflictError(message, details=details, response_body=response_body)
    elif status_code == 422:
        raise ValidationError(message, details=details, response_body=response_body)
    elif status_code >= 500:
        raise ServerError(
            message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    raise APIError(
        message,
        status_code=status_code,
        details=details,
        response_body=response_body,
    )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return the delay before retry ``attempt`` (0-indexed), capped."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return params
    return {k: v for k, v in params.items() if v is not None}


def _decode(response: httpx.Response) -> Any:
    _raise_for_status(response)
    if response.content:
        return response.json()
    return None


class HTTPClient:
    """Synchronous HTTP client for the drawing store API.

    Wraps httpx.Client with error mapping and optional retry.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., a test transport).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = self._client.request(method, path, params=params, json=json)
            except httpx.ConnectError as e:
                if last_attempt:
                    raise ConnectionError(
                        f"Failed to connect to {url}", url=url, cause=e
                    ) from e
            except httpx.TimeoutException as e:
                if last_attempt:
                    raise TimeoutError(
                        f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if last_attempt or response.status_code not in RETRYABLE_STATUS_CODES:
                    return _decode(response)

            delay = _calculate_backoff(attempt)
            logger.debug(f"Retrying {method} {path} in {delay}s")
            time.sleep(delay)

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("PUT", path, params=params, json=json)


class AsyncHTTPClient:
    """Asynchronous HTTP client for the drawing store API.

    Wraps httpx.AsyncClient with the same error mapping and retry policy
    as HTTPClient.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async HTTP client.

        Args:
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., ASGITransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            last_attempt = attempt >= attempts - 1
            try:
                response = await self._client.request(
                    method, path, params=params, json=json
                )
            except httpx.ConnectError as e:
                if last_attempt:
                    raise ConnectionError(
                        f"Failed to connect to {url}", url=url, cause=e
                    ) from e
            except httpx.TimeoutException as e:
                if last_attempt:
                    raise TimeoutError(
                        f"Request to {url} timed out", timeout=self.timeout, url=url
                    ) from e
            else:
                if last_attempt or response.status_code not in RETRYABLE_STATUS_CODES:
                    return _decode(response)

            delay = _calculate_backoff(attempt)
            logger.debug(f"Retrying {method} {path} in {delay}s")
            await asyncio.sleep(delay)

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PUT", path, params=params, json=json)
