"""Manager for PromptGuide model: CRUD using a DB session."""

from typing import Any

from sqlalchemy.orm import Session

from ..models import PromptGuide


class GuideManager:
    """Provides access to PromptGuide model. Takes a DB session as input."""

    def __init__(self, session: Session):
        self._session = session

    def add_guide(self, *, platform: str, version: str, guide: dict[str, Any]) -> PromptGuide:
        row = PromptGuide(platform=platform, version=version)
        row.set_guide(guide)
        self._session.add(row)
        self._session.flush()
        return row

    def get_by_platform(self, platform: str) -> PromptGuide | None:
        """Exact platform match; the most recently stored version wins."""
        return (
            self._session.query(PromptGuide)
            .filter(PromptGuide.platform == platform)
            .order_by(PromptGuide.created_at.desc(), PromptGuide.guide_id.desc())
            .first()
        )

    def get_by_platform_version(self, platform: str, version: str) -> PromptGuide | None:
        return (
            self._session.query(PromptGuide)
            .filter(PromptGuide.platform == platform, PromptGuide.version == version)
            .first()
        )

    def list_guides(self) -> list[PromptGuide]:
        return (
            self._session.query(PromptGuide)
            .order_by(PromptGuide.platform, PromptGuide.guide_id)
            .all()
        )
