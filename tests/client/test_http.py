"""Unit tests for the client HTTP utilities in client/_http.py.

Note: These tests use httpx's MockTransport to avoid real network calls.
"""

import json

import httpx
import pytest

from client._http import (
    DEFAULT_RETRY_BACKOFF_MAX,
    AsyncHTTPClient,
    HTTPClient,
    _calculate_backoff,
    _parse_error_response,
    _raise_for_status,
)
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


# =============================================================================
# Helper Function Tests
# =============================================================================


class TestParseErrorResponse:
    """Tests for _parse_error_response()."""

    def test_plain_text_body(self):
        response = httpx.Response(409, text="File already exists: /a.excalidraw")

        assert _parse_error_response(response) == ("File already exists: /a.excalidraw", None)

    def test_fastapi_detail_string(self):
        response = httpx.Response(400, json={"detail": "Invalid request"})

        assert _parse_error_response(response) == ("Invalid request", None)

    def test_fastapi_validation_list(self):
        errors = [{"loc": ["body", "path"], "msg": "Input should be a valid string"}]
        response = httpx.Response(422, json={"detail": errors})

        message, details = _parse_error_response(response)

        assert message == "path: Input should be a valid string"
        assert details == {"errors": errors}

    def test_empty_body(self):
        response = httpx.Response(500)

        assert _parse_error_response(response) == ("HTTP 500 error", None)


class TestRaiseForStatus:
    """Tests for _raise_for_status()."""

    def test_success_does_not_raise(self):
        _raise_for_status(httpx.Response(200, json={"ok": True}))

    @pytest.mark.parametrize(
        "status_code, exc_type",
        [
            (400, BadRequestError),
            (404, NotFoundError),
            (409, ConflictError),
            (422, ValidationError),
            (500, ServerError),
            (503, ServerError),
            (405, APIError),
        ],
    )
    def test_status_mapping(self, status_code, exc_type):
        with pytest.raises(exc_type) as exc_info:
            _raise_for_status(httpx.Response(status_code, text="nope"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "nope"


class TestCalculateBackoff:
    """Tests for _calculate_backoff()."""

    def test_exponential(self):
        assert [_calculate_backoff(n, base=1.0) for n in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_capped(self):
        assert _calculate_backoff(50) == DEFAULT_RETRY_BACKOFF_MAX


# =============================================================================
# HTTPClient Tests
# =============================================================================


class TestHTTPClient:
    """Tests for the synchronous HTTPClient."""

    def test_get_drops_none_params(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[])

        with HTTPClient("http://test/", transport=httpx.MockTransport(handler)) as client:
            assert client.get("/api/files", params={"dir": "/", "extra": None}) == []

        assert seen["params"] == {"dir": "/"}

    def test_put_sends_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = request.content
            return httpx.Response(200, json={"ok": True})

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            result = client.put("/api/drawing", json={"elements": []}, params={"path": "/a"})

        assert result == {"ok": True}
        assert seen["method"] == "PUT"
        assert json.loads(seen["body"]) == {"elements": []}

    def test_empty_response_returns_none(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(204))

        with HTTPClient("http://test", transport=transport) as client:
            assert client.get("/") is None

    def test_error_response_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="disk full"))

        with HTTPClient("http://test", transport=transport) as client:
            with pytest.raises(ServerError, match="disk full"):
                client.put("/api/drawing", json={})

    def test_connect_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ConnectionError) as exc_info:
                client.get("/api/files")

        assert exc_info.value.url == "http://test/api/files"

    def test_timeout_wrapped(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with HTTPClient("http://test", timeout=1.5, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(TimeoutError) as exc_info:
                client.get("/api/files")

        assert exc_info.value.timeout == 1.5

    def test_no_retry_by_default(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="busy")

        with HTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ServerError):
                client.get("/api/files")

        assert len(calls) == 1

    def test_retries_gateway_errors_when_enabled(self, monkeypatch):
        monkeypatch.setattr("client._http._calculate_backoff", lambda attempt: 0)
        responses = [httpx.Response(503), httpx.Response(502), httpx.Response(200, json=[])]

        def handler(request):
            return responses.pop(0)

        with HTTPClient(
            "http://test",
            retry_enabled=True,
            max_retries=3,
            transport=httpx.MockTransport(handler),
        ) as client:
            assert client.get("/api/files") == []

        assert responses == []

    def test_retry_gives_up_after_max_retries(self, monkeypatch):
        monkeypatch.setattr("client._http._calculate_backoff", lambda attempt: 0)
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, text="busy")

        with HTTPClient(
            "http://test",
            retry_enabled=True,
            max_retries=2,
            transport=httpx.MockTransport(handler),
        ) as client:
            with pytest.raises(ServerError):
                client.get("/api/files")

        assert len(calls) == 3


# =============================================================================
# AsyncHTTPClient Tests
# =============================================================================


class TestAsyncHTTPClient:
    """Tests for the asynchronous AsyncHTTPClient."""

    async def test_get(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}}))

        async with AsyncHTTPClient("http://test", transport=transport) as client:
            assert await client.get("/api/drawing", params={"path": "/a"}) == {"data": {}}

    async def test_error_response_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(400, text="Invalid path"))

        async with AsyncHTTPClient("http://test", transport=transport) as client:
            with pytest.raises(BadRequestError, match="Invalid path"):
                await client.get("/api/drawing", params={"path": "/../x"})

    async def test_retries_when_enabled(self, monkeypatch):
        monkeypatch.setattr("client._http._calculate_backoff", lambda attempt: 0)
        responses = [httpx.Response(504), httpx.Response(200, json={"ok": True})]
        transport = httpx.MockTransport(lambda request: responses.pop(0))

        async with AsyncHTTPClient(
            "http://test", retry_enabled=True, transport=transport
        ) as client:
            assert await client.post("/api/files", json={"path": "/a"}) == {"ok": True}

    async def test_connect_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with AsyncHTTPClient("http://test", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ConnectionError):
                await client.get("/api/files")
