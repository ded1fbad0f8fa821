"""Service layer exports."""

from .enhance.service import EnhanceService
from .guide.service import GuideService

__all__ = ["EnhanceService", "GuideService"]
