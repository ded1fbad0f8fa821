"""SQLAlchemy models and knowledge document types."""

from .base import Base
from .prompt_guide import PromptGuide
from .knowledge import (
    AntiPattern,
    Example,
    KnowledgeDocument,
    Principle,
    StructuralElement,
    TaskCategory,
    TaskGuide,
)

__all__ = [
    "Base",
    "PromptGuide",
    "AntiPattern",
    "Example",
    "KnowledgeDocument",
    "Principle",
    "StructuralElement",
    "TaskCategory",
    "TaskGuide",
]
