"""Assemble the meta-prompt (system instruction) from a knowledge document."""

from typing import Sequence

from prompt_enhancer.models import (
    AntiPattern,
    KnowledgeDocument,
    Principle,
    StructuralElement,
    TaskCategory,
    TaskGuide,
)
from prompt_enhancer.prompts import (
    ANTI_PATTERNS_HEADER,
    CLOSING_INSTRUCTION,
    EXAMPLE_TRANSFORMATION_HEADER,
    META_PROMPT_PREAMBLE,
    STRUCTURAL_ELEMENTS_HEADER,
    TASK_GUIDES_HEADER,
)

MAX_STRUCTURAL_ELEMENTS: int = 2
MAX_ANTI_PATTERNS: int = 3


def compose_meta_prompt(
    document: KnowledgeDocument,
    selected_principles: Sequence[Principle],
    task: TaskCategory,
) -> str:
    """
    Build the instruction text.

    Sections, always in this order:
      1. preamble
      2. selected principles
      3. structural guidelines (first two)
      4. mistakes to avoid (first three)
      5. task-specific guidance, only for a non-general task with guides
      6. closing instruction

    A section header is only written when its section has entries.
    """
    parts: list[str] = [META_PROMPT_PREAMBLE]
    parts.extend(_render_entries(selected_principles))

    structural = document.structural_elements[:MAX_STRUCTURAL_ELEMENTS]
    if structural:
        parts.append(STRUCTURAL_ELEMENTS_HEADER)
        parts.extend(_render_entries(structural))

    anti_patterns = document.anti_patterns[:MAX_ANTI_PATTERNS]
    if anti_patterns:
        parts.append(ANTI_PATTERNS_HEADER)
        parts.extend(_render_entries(anti_patterns))

    task_guides = document.guides_for(task) if task is not TaskCategory.GENERAL else ()
    if task_guides:
        parts.append(TASK_GUIDES_HEADER)
        parts.extend(_render_task_guide(idx, guide) for idx, guide in enumerate(task_guides, start=1))

    parts.append(CLOSING_INSTRUCTION)
    return "".join(parts)


def _render_entry(idx: int, title: str, content: str) -> str:
    return f"{idx}. **{title}**\n   {content}\n"


def _render_entries(entries: Sequence[Principle | StructuralElement | AntiPattern]) -> list[str]:
    return [
        _render_entry(idx, entry.title, entry.content) + "\n"
        for idx, entry in enumerate(entries, start=1)
    ]


def _render_task_guide(idx: int, guide: TaskGuide) -> str:
    text = _render_entry(idx, guide.title, guide.content)
    if guide.example is not None:
        text += (
            f"   {EXAMPLE_TRANSFORMATION_HEADER}\n"
            f"   Before: {guide.example.before}\n"
            f"   After: {guide.example.after}\n"
        )
    return text + "\n"
