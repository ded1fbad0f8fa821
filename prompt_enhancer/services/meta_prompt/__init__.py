"""Meta-prompt construction: principle selection, task classification, composition."""

from .builder import InstructionPlan, build_instruction, plan_instruction
from .composer import compose_meta_prompt
from .principle_selector import select_principles
from .task_classifier import classify_task

__all__ = [
    "InstructionPlan",
    "build_instruction",
    "plan_instruction",
    "compose_meta_prompt",
    "select_principles",
    "classify_task",
]
