"""Tests for the Flask HTTP layer."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app import app
from prompt_enhancer.errors import CompletionError
from tests.conftest import make_guide


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def mock_complete(monkeypatch) -> MagicMock:
    fake = MagicMock(return_value="A sharper prompt.")
    monkeypatch.setattr("prompt_enhancer.services.enhance.service.complete", fake)
    return fake


class TestHealth:
    def test_health_check(self, client) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "success"
        assert "timestamp" in body


class TestEnhanceEndpoint:
    def test_missing_platform(self, client, mock_complete) -> None:
        resp = client.post("/api/enhance", json={"prompt": "hi"})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Platform is required in the request body"}

    def test_missing_prompt(self, client, mock_complete) -> None:
        resp = client.post("/api/enhance", json={"platform": "gemini"})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Prompt is required in the request body"}

    def test_guide_not_found(self, client, session, mock_adapter, mock_complete) -> None:
        resp = client.post("/api/enhance", json={"platform": "nope", "prompt": "hi"})
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Guide not found for the specified platform"}

    def test_success_returns_only_enhanced_prompt(self, client, session, mock_adapter, mock_complete) -> None:
        make_guide(session, platform="gemini")
        session.commit()

        resp = client.post("/api/enhance", json={"platform": "gemini", "prompt": "write code"})

        assert resp.status_code == 200
        assert resp.get_json() == {"enhanced_prompt": "A sharper prompt."}

    def test_accepts_form_body(self, client, session, mock_adapter, mock_complete) -> None:
        make_guide(session, platform="gemini")
        session.commit()

        resp = client.post("/api/enhance", data={"platform": "gemini", "prompt": "write code"})

        assert resp.status_code == 200

    def test_model_failure(self, client, session, mock_adapter, mock_complete) -> None:
        make_guide(session, platform="gemini")
        session.commit()
        mock_complete.side_effect = CompletionError("AI model request failed", details="quota exceeded")

        resp = client.post("/api/enhance", json={"platform": "gemini", "prompt": "hi"})

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "AI model request failed", "details": "quota exceeded"}

    def test_database_failure(self, client, monkeypatch, mock_complete) -> None:
        def _fail(_platform):
            raise OperationalError("SELECT", {}, Exception("disk I/O error"))

        monkeypatch.setattr("prompt_enhancer.services.enhance.service.GuideService.get_guide", _fail)

        resp = client.post("/api/enhance", json={"platform": "gemini", "prompt": "hi"})

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Database query failed"}

    def test_unexpected_failure(self, client, monkeypatch, mock_complete) -> None:
        def _fail(_platform):
            raise RuntimeError("kaboom")

        monkeypatch.setattr("prompt_enhancer.services.enhance.service.GuideService.get_guide", _fail)

        resp = client.post("/api/enhance", json={"platform": "gemini", "prompt": "hi"})

        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Internal server error"}


class TestInstructionEndpoint:
    def test_returns_preview(self, client, session, mock_adapter, mock_complete) -> None:
        make_guide(session, platform="gemini")
        session.commit()

        resp = client.post("/api/instruction", json={"platform": "gemini", "prompt": "write code"})

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["task_category"] == "code_generation"
        assert body["principles"][0] == "Name the Language"
        assert "Key Structural Guidelines:" in body["instruction"]
        mock_complete.assert_not_called()

    def test_guide_not_found(self, client, session, mock_adapter) -> None:
        resp = client.post("/api/instruction", json={"platform": "nope", "prompt": "hi"})
        assert resp.status_code == 404


class TestGuidesEndpoint:
    def test_lists_guides(self, client, session, mock_adapter) -> None:
        make_guide(session, platform="gemini")
        make_guide(session, platform="chatgpt")
        session.commit()

        resp = client.get("/api/guides")

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["total"] == 2
        assert [g["platform"] for g in body["guides"]] == ["chatgpt", "gemini"]
