"""
Integration tests for the form page: redirects, page load and submission.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from form_telemetry.core.errors import SessionIdGenerationError
from form_telemetry.services.interfaces import SessionStore


TEST_SESSION_ID = "1234ABCD5678"


@pytest.mark.integration
class TestPageLoad:

    @pytest.mark.parametrize("path", ["", "/"])
    def test_root_redirects_to_form(self, client, mock_session_store, path):
        resp = client.get(f"http://localhost{path}", follow_redirects=False)

        assert resp.status_code == 303
        assert resp.headers["location"] == "/index.html"
        mock_session_store.new_session.assert_not_called()
        mock_session_store.find.assert_not_called()

    def test_get_form_creates_session(self, client, mock_session_store):
        resp = client.get("/index.html")

        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert TEST_SESSION_ID in resp.text
        assert "<html>" in resp.text
        assert "{{" not in resp.text
        assert mock_session_store.new_session.call_count == 1
        mock_session_store.find.assert_not_called()
        mock_session_store.delete.assert_not_called()

    def test_get_form_lists_tracked_controls(self, client):
        resp = client.get("/index.html")

        for control in ("inputEmail", "inputCVV", "inputCardNumber"):
            assert control in resp.text

    def test_session_id_generation_failure(self, app_factory):
        store = MagicMock(spec=SessionStore)
        store.new_session.side_effect = SessionIdGenerationError()

        with TestClient(app_factory(store)) as test_client:
            resp = test_client.get("/index.html")

        assert resp.status_code == 500
        assert resp.json()["error_code"] == "SYS_002"

    def test_unexpected_store_failure_is_wrapped(self, app_factory):
        store = MagicMock(spec=SessionStore)
        store.new_session.side_effect = RuntimeError("boom")

        with TestClient(app_factory(store)) as test_client:
            resp = test_client.get("/index.html")

        assert resp.status_code == 500
        body = resp.json()
        assert body["error_code"] == "SYS_001"
        assert body["message"] == "Failed to create session"
        assert body["details"]["error_type"] == "RuntimeError"
        assert body["details"]["path"] == "/index.html"

    def test_real_store_gives_each_load_a_new_session(self, app_factory, session_store):
        with TestClient(app_factory(session_store)) as test_client:
            test_client.get("/index.html")
            test_client.get("/index.html")

        assert len(session_store) == 2


@pytest.mark.integration
class TestBadMethods:

    @pytest.mark.parametrize("method,path", [
        ("POST", "/"),
        ("DELETE", "/"),
        ("DELETE", "/index.html"),
        ("PUT", "/index.html"),
        ("GET", "/api"),
    ])
    def test_method_not_allowed(self, client, mock_session_store, method, path):
        resp = client.request(method, path)

        assert resp.status_code == 405
        assert resp.json()["error_code"] == "VAL_001"
        mock_session_store.new_session.assert_not_called()
        mock_session_store.find.assert_not_called()
        mock_session_store.delete.assert_not_called()

    def test_unknown_path(self, client):
        resp = client.get("/nowhere.html")

        assert resp.status_code == 404
        assert resp.json()["error_code"] == "RES_001"


@pytest.mark.integration
@pytest.mark.critical
class TestFormSubmission:

    def test_submit_retires_session(self, client, mock_session_store):
        resp = client.post(
            "/index.html",
            data={"SessionId": TEST_SESSION_ID, "inputEmail": "me@home.com"},
        )

        assert resp.status_code == 201
        mock_session_store.find.assert_called_once_with(TEST_SESSION_ID)
        mock_session_store.delete.assert_called_once_with(TEST_SESSION_ID)
        mock_session_store.new_session.assert_not_called()

    def test_submit_without_session_id(self, empty_client, empty_session_store):
        resp = empty_client.post("/index.html", data={"BadIDWhichShouldBeIgnored": "IgnoreMe"})

        assert resp.status_code == 403
        assert resp.json()["error_code"] == "AUTH_002"
        empty_session_store.find.assert_called_once_with("")
        empty_session_store.delete.assert_not_called()

    def test_submit_with_unknown_session_id(self, empty_client, empty_session_store):
        resp = empty_client.post("/index.html", data={"SessionId": "BADONE"})

        assert resp.status_code == 403
        empty_session_store.find.assert_called_once_with("BADONE")
        empty_session_store.delete.assert_not_called()

    def test_second_submission_is_refused(self, app_factory, session_store):
        entry = session_store.new_session()

        with TestClient(app_factory(session_store)) as test_client:
            first = test_client.post("/index.html", data={"SessionId": entry.session_id})
            second = test_client.post("/index.html", data={"SessionId": entry.session_id})

        assert first.status_code == 201
        assert second.status_code == 403
        assert session_store.find(entry.session_id) is None
