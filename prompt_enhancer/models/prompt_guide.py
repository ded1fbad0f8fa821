"""PromptGuide model: one stored knowledge document per platform version."""

import json
import time
from typing import Any

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def guide_body_to_json(guide: dict[str, Any] | None) -> str:
    return json.dumps(guide or {})


def guide_body_from_json(s: str | None) -> dict[str, Any]:
    """Parse the stored guide body. Unreadable JSON yields an empty guide."""
    if not s or not s.strip():
        return {}
    try:
        data = json.loads(s)
    except (json.JSONDecodeError, TypeError):
        return {}
    return data if isinstance(data, dict) else {}


class PromptGuide(Base):
    """Prompting guide row keyed by platform."""

    __tablename__ = "prompt_guides"

    guide_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    platform: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    version: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    guide_json: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    created_at: Mapped[int] = mapped_column(
        Integer, nullable=False, default=lambda: int(time.time())
    )  # UTC epoch

    def __repr__(self) -> str:
        return f"<PromptGuide {self.guide_id} {self.platform!r} v{self.version}>"

    def get_guide(self) -> dict[str, Any]:
        return guide_body_from_json(self.guide_json)

    def set_guide(self, guide: dict[str, Any] | None) -> None:
        self.guide_json = guide_body_to_json(guide)
