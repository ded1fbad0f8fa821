"""Prompt strings for LLM tasks."""

from .meta_prompt_system import (
    ANTI_PATTERNS_HEADER,
    CLOSING_INSTRUCTION,
    EXAMPLE_TRANSFORMATION_HEADER,
    META_PROMPT_PREAMBLE,
    STRUCTURAL_ELEMENTS_HEADER,
    TASK_GUIDES_HEADER,
)

__all__ = [
    "ANTI_PATTERNS_HEADER",
    "CLOSING_INSTRUCTION",
    "EXAMPLE_TRANSFORMATION_HEADER",
    "META_PROMPT_PREAMBLE",
    "STRUCTURAL_ELEMENTS_HEADER",
    "TASK_GUIDES_HEADER",
]
