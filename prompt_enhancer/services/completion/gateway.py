"""Text-generation calls through the OpenAI SDK."""

import logging

from openai import OpenAI, OpenAIError

from constants import LLM_API_KEY, LLM_BASE_URL, LLM_MODEL, LLM_TEMPERATURE, LLM_TOP_P
from prompt_enhancer.errors import CompletionError

logger = logging.getLogger(__name__)


def complete(system_text: str, user_text: str, *, model: str = LLM_MODEL) -> str:
    """Send ``system_text`` as the system message and ``user_text`` as the user message."""
    logger.info("Calling model=%s system_chars=%d user_chars=%d", model, len(system_text), len(user_text))
    try:
        client = _get_openai_client()
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_text},
                {"role": "user", "content": user_text},
            ],
            temperature=LLM_TEMPERATURE,
            top_p=LLM_TOP_P,
        )
    except OpenAIError as exc:
        logger.error("AI model error: %s", exc)
        raise CompletionError("AI model request failed", details=str(exc)) from exc

    content = _first_message_content(response)
    if content is None:
        raise CompletionError("AI model request failed", details="Unexpected model response format.")
    return content


def _first_message_content(response: object) -> str | None:
    choices = getattr(response, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None


def _get_openai_client() -> OpenAI:
    return OpenAI(base_url=LLM_BASE_URL, api_key=LLM_API_KEY)
