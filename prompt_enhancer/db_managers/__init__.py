"""Managers: take a DB session and provide access to models."""

from .guide_manager import GuideManager

__all__ = ["GuideManager"]
