"""Service for prompt enhancement: guide lookup, meta-prompt, completion."""

import logging
from typing import TypedDict

from prompt_enhancer.errors import MissingPlatformError, MissingPromptError
from prompt_enhancer.services.completion.gateway import complete
from prompt_enhancer.services.guide.service import GuideService
from prompt_enhancer.services.meta_prompt import InstructionPlan, plan_instruction

logger = logging.getLogger(__name__)


class InstructionPreview(TypedDict):
    platform: str
    version: str
    task_category: str
    principles: list[str]
    instruction: str


class EnhanceResult(TypedDict):
    enhanced_prompt: str
    platform: str
    version: str
    task_category: str
    principles_used: list[str]
    instruction_chars: int


class EnhanceService:
    """Enhancement-related service operations."""

    @staticmethod
    def preview_instruction(platform: str | None, prompt: str | None) -> InstructionPreview:
        """Build the meta-prompt without calling the model."""
        platform_val, prompt_val = _validate(platform, prompt)
        document = GuideService.get_guide(platform_val)
        plan = plan_instruction(prompt_val, document)
        return InstructionPreview(
            platform=document.platform,
            version=document.version,
            task_category=plan.task.value,
            principles=_titles(plan),
            instruction=plan.instruction,
        )

    @staticmethod
    def enhance(platform: str | None, prompt: str | None) -> EnhanceResult:
        platform_val, prompt_val = _validate(platform, prompt)
        logger.info("Searching for guide: %s", platform_val)
        document = GuideService.get_guide(platform_val)

        plan = plan_instruction(prompt_val, document)
        logger.info("Meta-prompt constructed (%d characters)", len(plan.instruction))

        enhanced = complete(plan.instruction, prompt_val)
        logger.info("Prompt enhanced successfully platform=%s", platform_val)
        return EnhanceResult(
            enhanced_prompt=enhanced,
            platform=document.platform,
            version=document.version,
            task_category=plan.task.value,
            principles_used=_titles(plan),
            instruction_chars=len(plan.instruction),
        )


def _validate(platform: str | None, prompt: str | None) -> tuple[str, str]:
    # Platform is checked first; a request missing both reports the platform.
    if not isinstance(platform, str) or not platform.strip():
        raise MissingPlatformError()
    if not isinstance(prompt, str) or not prompt.strip():
        raise MissingPromptError()
    return platform, prompt


def _titles(plan: InstructionPlan) -> list[str]:
    return [p.title for p in plan.principles]
