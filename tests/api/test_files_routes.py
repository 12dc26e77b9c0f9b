"""Integration tests for the directory resource (/api/files)."""

import json

import pytest


class TestListFiles:
    """Tests for GET /api/files."""

    def test_empty_root(self, client_with_store):
        client, _ = client_with_store

        response = client.get("/api/files")

        assert response.status_code == 200
        assert response.json() == []

    def test_entries_have_expected_fields(self, client_with_store, drawings_root):
        client, _ = client_with_store
        (drawings_root / "team").mkdir()
        (drawings_root / "a.excalidraw").write_text("{}")

        response = client.get("/api/files", params={"dir": "/"})

        entries = response.json()
        assert [e["name"] for e in entries] == ["team", "a.excalidraw"]
        assert entries[0]["isDir"] is True
        assert entries[1]["isDir"] is False
        assert entries[1]["size"] == 2
        assert set(entries[1]) == {"name", "isDir", "size", "mtime"}

    def test_missing_directory_is_not_found(self, client_with_store):
        client, _ = client_with_store

        response = client.get("/api/files", params={"dir": "/missing"})

        assert response.status_code == 404
        assert response.text == "No such directory: /missing"

    def test_file_is_not_a_directory(self, client_with_store, drawings_root):
        client, _ = client_with_store
        (drawings_root / "a.excalidraw").write_text("{}")

        response = client.get("/api/files", params={"dir": "/a.excalidraw"})

        assert response.status_code == 400

    def test_relative_dir_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.get("/api/files", params={"dir": "team"})

        assert response.status_code == 400

    def test_escaping_dir_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.get("/api/files", params={"dir": "/../.."})

        assert response.status_code == 400


class TestCreateFile:
    """Tests for POST /api/files."""

    def test_create_then_list(self, client_with_store):
        client, _ = client_with_store

        created = client.post("/api/files", json={"path": "/a/b.excalidraw"})
        listed = client.get("/api/files", params={"dir": "/a"})

        assert created.status_code == 201
        assert created.json() == {"ok": True}
        [entry] = listed.json()
        assert entry["name"] == "b.excalidraw"
        assert entry["isDir"] is False

    def test_created_file_is_blank_document(self, client_with_store):
        client, _ = client_with_store

        client.post("/api/files", json={"path": "/b.excalidraw"})
        data = client.get("/api/drawing", params={"path": "/b.excalidraw"}).json()["data"]

        assert data["elements"] == []
        assert data["appState"] == {"viewBackgroundColor": "#ffffff"}

    def test_create_with_template(self, client_with_store):
        client, _ = client_with_store
        template = {"elements": [{"id": "t1"}], "appState": {}, "files": {}}

        client.post("/api/files", json={"path": "/t.excalidraw", "template": template})
        data = client.get("/api/drawing", params={"path": "/t.excalidraw"}).json()["data"]

        assert data["elements"] == [{"id": "t1"}]

    def test_existing_file_conflicts_and_is_untouched(self, client_with_store, drawings_root):
        client, _ = client_with_store
        target = drawings_root / "taken.excalidraw"
        target.write_text(json.dumps({"elements": [{"id": "keep"}]}))

        response = client.post(
            "/api/files",
            json={"path": "/taken.excalidraw", "template": {"elements": []}},
        )

        assert response.status_code == 409
        assert response.text == "File already exists: /taken.excalidraw"
        assert json.loads(target.read_text()) == {"elements": [{"id": "keep"}]}

    def test_missing_path_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files", json={})

        assert response.status_code == 400
        assert response.text == "path must be absolute like /team/foo.excalidraw"

    def test_empty_body_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files")

        assert response.status_code == 400

    def test_relative_path_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files", json={"path": "a.excalidraw"})

        assert response.status_code == 400

    def test_escaping_path_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files", json={"path": "/../x.excalidraw"})

        assert response.status_code == 400

    def test_non_string_path_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files", json={"path": 123})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "path must be absolute like /team/foo.excalidraw"

    def test_invalid_template_is_bad_request(self, client_with_store, drawings_root):
        client, _ = client_with_store

        response = client.post(
            "/api/files", json={"path": "/t.excalidraw", "template": {"elements": "x"}}
        )

        assert response.status_code == 400
        assert response.text.startswith("Invalid template")
        assert not (drawings_root / "t.excalidraw").exists()

    def test_non_json_body_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post(
            "/api/files", content=b"garbage", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert "not valid JSON" in response.text

    def test_non_object_body_is_bad_request(self, client_with_store):
        client, _ = client_with_store

        response = client.post("/api/files", json=["/a.excalidraw"])

        assert response.status_code == 400


class TestFilesMethodNotAllowed:
    """Tests for unsupported methods on /api/files."""

    def test_put_is_rejected(self, client_with_store):
        client, _ = client_with_store

        response = client.put("/api/files", json={})

        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"

    def test_delete_is_rejected(self, client_with_store):
        client, _ = client_with_store

        response = client.delete("/api/files")

        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"

    @pytest.mark.parametrize("method", ["PATCH", "TRACE", "HEAD"])
    def test_any_other_method_lists_both(self, client_with_store, method):
        client, _ = client_with_store

        response = client.request(method, "/api/files")

        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"


class TestServiceEndpoints:
    """Tests for the root and health endpoints."""

    def test_health(self, client_with_store):
        client, _ = client_with_store
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client_with_store):
        client, _ = client_with_store
        assert client.get("/").json()["docs_url"] == "/docs"
