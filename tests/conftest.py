"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_document_store
from main import app
from models.store import DocumentStore


@pytest.fixture
def drawings_root(tmp_path):
    """Provide an empty sandbox root directory."""
    root = tmp_path / "drawings"
    root.mkdir()
    return root


@pytest.fixture
def store(drawings_root):
    """Provide a DocumentStore rooted at a fresh temporary directory."""
    return DocumentStore(drawings_root)


@pytest.fixture
def client_with_store(store):
    """Provide a TestClient whose routes use the temporary store.

    Uses FastAPI's dependency override system to inject the test store
    instead of the global one, so the app's lifespan never runs.

    Yields:
        A tuple of (TestClient, DocumentStore).

    Example:
        def test_something(client_with_store):
            client, store = client_with_store
            response = client.get("/api/files")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_document_store] = lambda: store
    client = TestClient(app)

    yield client, store

    app.dependency_overrides.clear()
