"""Pick the principles of a knowledge document most relevant to a request."""

from typing import Sequence

from prompt_enhancer.models import Principle

MAX_SELECTED_PRINCIPLES: int = 5

# Below this many pattern matches the selection is topped up by priority
MIN_MATCHED_BEFORE_FILL: int = 3

# Rank given to principles without an explicit priority
UNPRIORITIZED_RANK: int = 999


def priority_rank(principle: Principle) -> int:
    return UNPRIORITIZED_RANK if principle.priority is None else principle.priority


def rank_by_priority(principles: Sequence[Principle]) -> list[Principle]:
    """Principles ordered by ascending priority; ties keep document order."""
    return sorted(principles, key=priority_rank)


def matches_request(principle: Principle, request_lower: str) -> bool:
    return any(
        pattern.lower() in request_lower
        for pattern in principle.detection_patterns
        if pattern
    )


def select_principles(request: str, principles: Sequence[Principle]) -> list[Principle]:
    """
    Return at most five principles for ``request``.

    Principles whose detection patterns occur in the request come first, in
    document order. When fewer than three matched, the remainder is filled from
    the priority ranking until five are selected or the document runs out.
    """
    request_lower = (request or "").lower()

    matched: list[Principle] = []
    seen_titles: set[str] = set()
    for principle in principles:
        if principle.title in seen_titles:
            continue
        if matches_request(principle, request_lower):
            matched.append(principle)
            seen_titles.add(principle.title)

    selected = matched
    if len(matched) < MIN_MATCHED_BEFORE_FILL:
        for principle in rank_by_priority(principles):
            if len(selected) >= MAX_SELECTED_PRINCIPLES:
                break
            if principle.title in seen_titles:
                continue
            selected.append(principle)
            seen_titles.add(principle.title)

    return selected[:MAX_SELECTED_PRINCIPLES]
