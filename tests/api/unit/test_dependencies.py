"""Unit tests for API dependency injection in api/dependencies.py."""

import pytest

import api.dependencies as deps
from api.dependencies import (
    get_document_store,
    initialize_document_store,
    shutdown_document_store,
)
from api.settings import Settings
from models.store import DocumentStore


@pytest.fixture(autouse=True)
def reset_global_store():
    """Reset the global store before and after each test."""
    original_store = deps._document_store
    deps._document_store = None

    yield

    deps._document_store = original_store


def make_settings(root, create_root=True) -> Settings:
    return Settings(drawings_root=root, create_root=create_root, log_level=20)


class TestGetDocumentStore:
    """Tests for get_document_store()."""

    def test_raises_when_not_initialized(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_document_store()

    def test_returns_initialized_store(self, tmp_path):
        store = initialize_document_store(make_settings(tmp_path))

        assert get_document_store() is store


class TestInitializeDocumentStore:
    """Tests for initialize_document_store()."""

    def test_creates_root_when_configured(self, tmp_path):
        root = tmp_path / "new" / "root"

        store = initialize_document_store(make_settings(root))

        assert root.is_dir()
        assert isinstance(store, DocumentStore)
        assert store.root == root

    def test_leaves_root_alone_when_not_configured(self, tmp_path):
        root = tmp_path / "absent"

        initialize_document_store(make_settings(root, create_root=False))

        assert not root.exists()

    def test_loads_settings_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DRAWINGS_ROOT", str(tmp_path / "env-root"))

        store = initialize_document_store()

        assert store.root == tmp_path / "env-root"


class TestShutdownDocumentStore:
    """Tests for shutdown_document_store()."""

    def test_clears_store(self, tmp_path):
        initialize_document_store(make_settings(tmp_path))

        shutdown_document_store()

        with pytest.raises(RuntimeError):
            get_document_store()
