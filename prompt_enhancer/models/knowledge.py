"""Knowledge document value types.

A knowledge document is the parsed form of a stored prompting guide. Parsing
never fails: absent or malformed lists read as empty, entries that are not
objects are skipped, and fields of the wrong type read as absent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TaskCategory(str, Enum):
    CODE_GENERATION = "code_generation"
    FORMAL_WRITING = "formal_writing"
    CREATIVE_WRITING = "creative_writing"
    DATA_ANALYSIS = "data_analysis"
    REASONING_AND_ANALYSIS = "reasoning_and_analysis"
    GENERAL = "general"


@dataclass(frozen=True)
class Principle:
    title: str
    content: str
    keywords: tuple[str, ...] = ()
    detection_patterns: tuple[str, ...] = ()
    priority: int | None = None


@dataclass(frozen=True)
class StructuralElement:
    title: str
    content: str


@dataclass(frozen=True)
class AntiPattern:
    title: str
    content: str


@dataclass(frozen=True)
class Example:
    before: str
    after: str


@dataclass(frozen=True)
class TaskGuide:
    title: str
    content: str
    example: Example | None = None


@dataclass(frozen=True)
class KnowledgeDocument:
    platform: str
    version: str
    principles: tuple[Principle, ...] = ()
    structural_elements: tuple[StructuralElement, ...] = ()
    anti_patterns: tuple[AntiPattern, ...] = ()
    task_specific_guides: dict[str, tuple[TaskGuide, ...]] = field(default_factory=dict)

    @classmethod
    def from_guide(cls, platform: str, version: str, guide: object) -> "KnowledgeDocument":
        """Build a document from a stored guide body (``{"principles": [...], ...}``)."""
        body = guide if isinstance(guide, dict) else {}
        return cls(
            platform=platform,
            version=version,
            principles=tuple(principle_from_dict(d) for d in _dict_items(body.get("principles"))),
            structural_elements=tuple(
                StructuralElement(title=_str(d.get("title")), content=_str(d.get("content")))
                for d in _dict_items(body.get("structural_elements"))
            ),
            anti_patterns=tuple(
                AntiPattern(title=_str(d.get("title")), content=_str(d.get("content")))
                for d in _dict_items(body.get("anti_patterns"))
            ),
            task_specific_guides=_task_guides_from_dict(body.get("task_specific_guides")),
        )

    def guides_for(self, task: TaskCategory) -> tuple[TaskGuide, ...]:
        return self.task_specific_guides.get(task.value, ())


def principle_from_dict(data: dict[str, Any]) -> Principle:
    return Principle(
        title=_str(data.get("title")),
        content=_str(data.get("content")),
        keywords=_str_tuple(data.get("keywords")),
        detection_patterns=_str_tuple(data.get("detection_patterns")),
        priority=_int_or_none(data.get("priority")),
    )


def task_guide_from_dict(data: dict[str, Any]) -> TaskGuide:
    raw_example = data.get("example")
    example = None
    if isinstance(raw_example, dict):
        example = Example(before=_str(raw_example.get("before")), after=_str(raw_example.get("after")))
    return TaskGuide(title=_str(data.get("title")), content=_str(data.get("content")), example=example)


def _task_guides_from_dict(value: object) -> dict[str, tuple[TaskGuide, ...]]:
    if not isinstance(value, dict):
        return {}
    return {
        str(task): tuple(task_guide_from_dict(d) for d in _dict_items(entries))
        for task, entries in value.items()
    }


def _dict_items(value: object) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _str(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def _str_tuple(value: object) -> tuple[str, ...]:
    if isinstance(value, list):
        return tuple(str(item) for item in value if isinstance(item, str))
    if isinstance(value, str) and value.strip():
        return (value,)
    return ()


def _int_or_none(value: object) -> int | None:
    # bool is an int subclass; a JSON true/false is not a priority
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None
