"""Prompt enhancer: rewrite user prompts using platform-specific prompting guides."""

from .models import KnowledgeDocument, TaskCategory
from .services.meta_prompt import build_instruction, classify_task, select_principles

__all__ = ["KnowledgeDocument", "TaskCategory", "build_instruction", "classify_task", "select_principles"]
