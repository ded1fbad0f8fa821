"""Classify a request into one task category using an ordered keyword table."""

import re
from dataclasses import dataclass

from prompt_enhancer.models import TaskCategory


@dataclass(frozen=True)
class TaskRule:
    category: TaskCategory
    keywords: tuple[str, ...]

    def pattern(self) -> re.Pattern[str]:
        # Keywords match at the start of a word, so "code" matches "codebase"
        # but not "decode".
        alternatives = "|".join(re.escape(k) for k in self.keywords)
        return re.compile(rf"\b(?:{alternatives})", re.IGNORECASE)


# Evaluated top to bottom; the first rule with a matching keyword wins.
TASK_RULES: tuple[TaskRule, ...] = (
    TaskRule(
        TaskCategory.CODE_GENERATION,
        (
            "code", "coding", "function", "program", "debug", "bug", "refactor",
            "implement", "algorithm", "api", "endpoint", "python", "javascript",
            "typescript", "java", "sql", "html", "css", "regex", "unit test",
            "compile", "stack trace",
        ),
    ),
    TaskRule(
        TaskCategory.FORMAL_WRITING,
        (
            "email", "letter", "report", "proposal", "memo", "formal",
            "professional", "business", "resume", "cover letter",
            "announcement", "press release", "documentation",
        ),
    ),
    TaskRule(
        TaskCategory.CREATIVE_WRITING,
        (
            "story", "stories", "poem", "poetry", "creative", "fiction", "novel",
            "narrative", "character", "lyrics", "song", "screenplay",
            "fantasy", "haiku",
        ),
    ),
    TaskRule(
        TaskCategory.DATA_ANALYSIS,
        (
            "data", "dataset", "csv", "spreadsheet", "excel", "statistic",
            "chart", "graph", "visualiz", "trend", "metric",
            "correlation", "regression", "dashboard",
        ),
    ),
    TaskRule(
        TaskCategory.REASONING_AND_ANALYSIS,
        (
            "analyze", "analyse", "analysis", "explain", "why", "compare",
            "evaluate", "reason", "pros and cons", "decide", "decision",
            "logic", "solve", "argument", "critique", "think through",
        ),
    ),
)

_COMPILED_RULES: tuple[tuple[TaskCategory, re.Pattern[str]], ...] = tuple(
    (rule.category, rule.pattern()) for rule in TASK_RULES
)


def classify_task(request: str) -> TaskCategory:
    """Return the category of the first matching rule, or ``GENERAL``."""
    text = request or ""
    for category, pattern in _COMPILED_RULES:
        if pattern.search(text):
            return category
    return TaskCategory.GENERAL
