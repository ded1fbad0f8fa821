"""Completion gateway."""

from .gateway import complete

__all__ = ["complete"]
