"""Shared pytest fixtures for the prompt enhancer tests."""

import json
import os
import tempfile
import time
import uuid
from contextlib import contextmanager
from unittest.mock import MagicMock

# app.py creates its tables at import time; keep that database out of the repo.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="prompt-enhancer-tests-"))

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from prompt_enhancer.models import KnowledgeDocument, Principle
from prompt_enhancer.models.base import Base
from prompt_enhancer.models.prompt_guide import PromptGuide


# ---------------------------------------------------------------------------
# In-memory SQLite engine + session factory
#
# A named shared-cache in-memory database lets every session opened through
# the adapter see the same data. Each test gets a unique name.
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def engine():
    db_name = f"test_{uuid.uuid4().hex}"
    url = f"file:{db_name}?mode=memory&cache=shared"
    eng = create_engine(
        f"sqlite:///{url}",
        connect_args={"check_same_thread": False, "uri": True},
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture(scope="function")
def _session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def session(_session_factory) -> Session:
    s = _session_factory()
    yield s
    s.close()


# ---------------------------------------------------------------------------
# DB adapter mock backed by the shared in-memory engine
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_adapter(_session_factory, monkeypatch):
    """
    Patch get_default_adapter() everywhere it is used to return an adapter
    whose .session() context-manager opens a new session from the test engine.
    """
    adapter = MagicMock()

    @contextmanager
    def test_session():
        s = _session_factory()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    adapter.session.side_effect = test_session

    for module_path in [
        "prompt_enhancer.services.guide.service",
        "prompt_enhancer.services.guide.seeder",
    ]:
        monkeypatch.setattr(f"{module_path}.get_default_adapter", lambda: adapter)

    return adapter


# ---------------------------------------------------------------------------
# Model and document factory helpers
# ---------------------------------------------------------------------------

def sample_guide_body() -> dict[str, object]:
    return {
        "principles": [
            {
                "title": "Be Specific",
                "content": "Say exactly what you want.",
                "keywords": ["specific"],
                "detection_patterns": ["explain"],
                "priority": 1,
            },
            {
                "title": "Give Context",
                "content": "Explain the background.",
                "keywords": ["context"],
                "detection_patterns": ["for my"],
                "priority": 2,
            },
            {
                "title": "Name the Language",
                "content": "State the language and version.",
                "keywords": ["code"],
                "detection_patterns": ["write code", "python"],
            },
        ],
        "structural_elements": [
            {"title": "Instruction First", "content": "Lead with the task."},
            {"title": "Use Delimiters", "content": "Separate input from instructions."},
            {"title": "Restate the Deliverable", "content": "End with what to return."},
        ],
        "anti_patterns": [
            {"title": "Vagueness", "content": "Avoid 'make it better'."},
        ],
        "task_specific_guides": {
            "code_generation": [
                {
                    "title": "Describe Edge Cases",
                    "content": "List the edge cases to handle.",
                    "example": {"before": "sort a list", "after": "Sort a list of ints, stable, in place."},
                },
            ],
        },
    }


def make_guide(
    session: Session,
    *,
    platform: str = "gemini",
    version: str = "1.0",
    guide: dict[str, object] | None = None,
    created_at: int | None = None,
) -> PromptGuide:
    row = PromptGuide(
        platform=platform,
        version=version,
        guide_json=json.dumps(sample_guide_body() if guide is None else guide),
        created_at=created_at if created_at is not None else int(time.time()),
    )
    session.add(row)
    session.flush()
    return row


def make_principle(title: str, *, priority: int | None = None, patterns: tuple[str, ...] = ()) -> Principle:
    return Principle(
        title=title,
        content=f"{title} content",
        detection_patterns=patterns,
        priority=priority,
    )


def make_document(**guide: object) -> KnowledgeDocument:
    return KnowledgeDocument.from_guide("gemini", "1.0", guide)


# ---------------------------------------------------------------------------
# OpenAI mock helpers
# ---------------------------------------------------------------------------

def make_openai_response(text: str) -> MagicMock:
    """Return a mock object shaped like a chat completions response."""
    mock_resp = MagicMock()
    message = MagicMock()
    message.content = text
    choice = MagicMock()
    choice.message = message
    mock_resp.choices = [choice]
    return mock_resp


def make_openai_client(text: str) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value = make_openai_response(text)
    return mock_client
