"""Build the instruction text for one enhancement request."""

import logging
from dataclasses import dataclass

from prompt_enhancer.models import KnowledgeDocument, Principle, TaskCategory

from .composer import compose_meta_prompt
from .principle_selector import select_principles
from .task_classifier import classify_task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstructionPlan:
    instruction: str
    task: TaskCategory
    principles: tuple[Principle, ...]


def plan_instruction(request: str, document: KnowledgeDocument) -> InstructionPlan:
    """Select principles, classify the task, and compose the meta-prompt."""
    selected = select_principles(request, document.principles)
    task = classify_task(request)
    instruction = compose_meta_prompt(document, selected, task)
    logger.debug(
        "Instruction composed platform=%s task=%s principles=%s chars=%d",
        document.platform,
        task.value,
        [p.title for p in selected],
        len(instruction),
    )
    return InstructionPlan(instruction=instruction, task=task, principles=tuple(selected))


def build_instruction(request: str, document: KnowledgeDocument) -> str:
    return plan_instruction(request, document).instruction
