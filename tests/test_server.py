"""Tests for the HTTP API."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from ideagraph.config import ACCESS_TOKEN_ENV, CLIENT_ID_ENV, CLIENT_SECRET_ENV, REFRESH_TOKEN_ENV
from ideagraph.exceptions import DocumentNotFoundError, FetchError, FileReadError, ParseError
from ideagraph.schemas import RevisionContent
from ideagraph.utils.logging_config import _FORMAT
from server.main import app
from server.routers_utils import error_response


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def no_server_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (ACCESS_TOKEN_ENV, CLIENT_ID_ENV, CLIENT_SECRET_ENV, REFRESH_TOKEN_ENV):
        monkeypatch.delenv(name, raising=False)


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestMindMapEndpoint:
    """Tests for POST /api/mindmap."""

    def test_builds_tree(self, client: TestClient) -> None:
        response = client.post("/api/mindmap", json={"text": "A\n  B\n    C\nD"})

        assert response.status_code == 200
        body = response.json()
        assert body["tree"] == {
            "name": "Document",
            "children": [
                {"name": "A", "children": [{"name": "B", "children": [{"name": "C"}]}]},
                {"name": "D"},
            ],
        }
        assert body["node_count"] == 4
        assert body["outline"] == "A\n    B\n        C\nD"

    def test_empty_text(self, client: TestClient) -> None:
        response = client.post("/api/mindmap", json={"text": ""})

        assert response.status_code == 200
        assert response.json()["tree"] == {"name": "Document"}
        assert response.json()["node_count"] == 0

    def test_tab_size(self, client: TestClient) -> None:
        response = client.post("/api/mindmap", json={"text": "A\n  B\n\tC", "tab_size": 4})

        b = response.json()["tree"]["children"][0]["children"][0]
        assert b == {"name": "B", "children": [{"name": "C"}]}

    def test_invalid_tab_size_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/mindmap", json={"text": "A", "tab_size": 0})

        assert response.status_code == 422

    def test_deep_outline_is_rejected(self, client: TestClient) -> None:
        text = "\n".join(" " * i + f"n{i}" for i in range(1500))

        response = client.post("/api/mindmap", json={"text": text})

        assert response.status_code == 400
        assert "1500 levels deep" in response.json()["error"]

    def test_outline_within_depth_limit(self, client: TestClient) -> None:
        text = "\n".join(" " * i + f"n{i}" for i in range(50))

        response = client.post("/api/mindmap", json={"text": text})

        assert response.status_code == 200
        node = response.json()["tree"]
        for i in range(50):
            node = node["children"][0]
            assert node["name"] == f"n{i}"
        assert "children" not in node

    def test_depth_limit_is_configurable(self, client: TestClient) -> None:
        with patch("server.processor.IDEAGRAPH_MAX_TREE_DEPTH", 2):
            response = client.post("/api/mindmap", json={"text": "A\n  B\n    C"})

        assert response.status_code == 400
        assert response.json() == {"error": "Outline is nested 3 levels deep; the limit is 2"}


class TestMindMapUploadEndpoint:
    """Tests for POST /api/mindmap/upload."""

    def test_upload_txt(self, client: TestClient) -> None:
        response = client.post(
            "/api/mindmap/upload",
            files={"file": ("ideas.txt", "Plan\n  Step one\n  Step two".encode(), "text/plain")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["summary"].startswith("Source: ideas.txt")
        assert [c["name"] for c in body["tree"]["children"][0]["children"]] == ["Step one", "Step two"]

    def test_upload_with_tab_size(self, client: TestClient) -> None:
        response = client.post(
            "/api/mindmap/upload",
            files={"file": ("ideas.txt", b"A\n  B\n\tC", "text/plain")},
            data={"tab_size": "8"},
        )

        assert response.status_code == 200
        assert response.json()["tree"]["children"][0]["children"][0]["children"] == [{"name": "C"}]

    def test_rejects_out_of_range_tab_size(self, client: TestClient) -> None:
        response = client.post(
            "/api/mindmap/upload",
            files={"file": ("ideas.txt", b"A", "text/plain")},
            data={"tab_size": "99"},
        )

        assert response.status_code == 400
        assert "tab_size" in response.json()["error"]

    def test_rejects_non_txt_file(self, client: TestClient) -> None:
        response = client.post(
            "/api/mindmap/upload",
            files={"file": ("ideas.md", b"# A", "text/markdown")},
        )

        assert response.status_code == 400
        assert "expected .txt" in response.json()["error"]

    def test_read_failure_is_bad_request(self, client: TestClient) -> None:
        with patch("server.processor.decode_upload", side_effect=FileReadError("File exceeds the 1 KB upload limit")):
            response = client.post(
                "/api/mindmap/upload",
                files={"file": ("ideas.txt", b"A", "text/plain")},
            )

        assert response.status_code == 400
        assert response.json() == {"error": "File exceeds the 1 KB upload limit"}

    def test_oversized_upload_is_rejected_before_decoding(self, client: TestClient) -> None:
        with (
            patch("server.routers.mindmap.MAX_UPLOAD_KB", 1),
            patch("server.processor.decode_upload") as mock_decode,
        ):
            response = client.post(
                "/api/mindmap/upload",
                files={"file": ("ideas.txt", b"A" * 2000, "text/plain")},
            )

        assert response.status_code == 400
        assert response.json() == {"error": "File exceeds the 1 KB upload limit"}
        mock_decode.assert_not_called()

    def test_upload_at_limit_is_accepted(self, client: TestClient) -> None:
        with patch("server.routers.mindmap.MAX_UPLOAD_KB", 1):
            response = client.post(
                "/api/mindmap/upload",
                files={"file": ("ideas.txt", b"A" * 1024, "text/plain")},
            )

        assert response.status_code == 200
        assert response.json()["node_count"] == 1


class TestRevisionsEndpoint:
    """Tests for POST /api/revisions."""

    def test_returns_revisions(self, client: TestClient) -> None:
        contents = [
            RevisionContent(id="1", modified_time=datetime(2024, 5, 1, 10, tzinfo=timezone.utc), content="first"),
            RevisionContent(
                id="2",
                modified_time=datetime(2024, 5, 2, 10, tzinfo=timezone.utc),
                content="(No plain text export available)",
            ),
        ]

        with patch("server.processor.fetch_all_revision_contents", AsyncMock(return_value=contents)) as mock_fetch:
            response = client.post(
                "/api/revisions",
                json={
                    "document": "https://docs.google.com/document/d/abc123/edit",
                    "access_token": "ya29.test",
                },
            )

        assert response.status_code == 200
        body = response.json()
        assert body["document_id"] == "abc123"
        assert [rev["id"] for rev in body["revisions"]] == ["1", "2"]
        assert body["revisions"][0]["modified_time"].startswith("2024-05-01T10:00:00")
        assert body["revisions"][1]["content"] == "(No plain text export available)"
        assert mock_fetch.call_args[0][1] == "abc123"

    def test_missing_document_id(self, client: TestClient) -> None:
        response = client.post("/api/revisions", json={"document": "  ", "access_token": "t"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing document ID."}

    def test_missing_token(self, client: TestClient, no_server_credentials: None) -> None:
        response = client.post("/api/revisions", json={"document": "abc123"})

        assert response.status_code == 401
        assert response.json() == {"error": "Missing access token."}

    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (DocumentNotFoundError("Document abc123 not found or not accessible"), 404),
            (FetchError("Failed to fetch https://example.com: boom"), 502),
            (ParseError("Malformed revision listing"), 502),
        ],
    )
    def test_upstream_errors(self, client: TestClient, error: Exception, status_code: int) -> None:
        with patch("server.processor.fetch_all_revision_contents", AsyncMock(side_effect=error)):
            response = client.post("/api/revisions", json={"document": "abc123", "access_token": "t"})

        assert response.status_code == status_code
        assert response.json() == {"error": str(error)}


class TestErrorResponse:
    """Tests for error logging and JSON error bodies."""

    def test_logs_status_and_error_text(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="server.routers_utils"):
            response = error_response(FileReadError("boom-detail"), upload_name="ideas.txt")

        assert response.status_code == 400
        assert "boom-detail" in caplog.text
        assert caplog.records[0].getMessage() == "Request failed (400): boom-detail"

    def test_formatted_line_carries_error_text(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="server.routers_utils"):
            error_response(DocumentNotFoundError("Document abc123 not found"), document="abc123")

        line = logging.Formatter(_FORMAT).format(caplog.records[0])
        assert line.endswith("server.routers_utils: Request failed (404): Document abc123 not found")
