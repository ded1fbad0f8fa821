"""Service for knowledge document lookups."""

import logging

from prompt_enhancer.db import get_default_adapter
from prompt_enhancer.db_managers import GuideManager
from prompt_enhancer.errors import GuideNotFoundError
from prompt_enhancer.models import KnowledgeDocument

logger = logging.getLogger(__name__)


class GuideService:
    """Guide-related service operations."""

    @staticmethod
    def get_guide(platform: str) -> KnowledgeDocument:
        """Return the stored document for ``platform`` (exact match)."""
        adapter = get_default_adapter()
        with adapter.session() as session:
            row = GuideManager(session).get_by_platform(platform)
            if row is None:
                logger.info("No guide found for platform: %s", platform)
                raise GuideNotFoundError(platform)
            logger.info("Guide found for platform=%s version=%s", row.platform, row.version)
            return KnowledgeDocument.from_guide(row.platform, row.version, row.get_guide())

    @staticmethod
    def list_platforms() -> list[dict[str, object]]:
        adapter = get_default_adapter()
        with adapter.session() as session:
            rows = GuideManager(session).list_guides()
            return [
                {
                    "platform": r.platform,
                    "version": r.version,
                    "created_at": r.created_at,
                }
                for r in rows
            ]
