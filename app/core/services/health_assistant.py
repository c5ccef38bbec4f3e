"""
Purpose: One assistant turn against the remote model.
Builds the system instruction for the mode, the user content (text with
recent context, or image parts) and maps every failure to a fixed reply.

Testing: Fake LLMClient; assert prompt selection and the fallback strings.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..interfaces import LLMClient, PromptFactory
from ..models import ChatMode, LLMSettings, Message

logger = logging.getLogger(__name__)

EMPTY_REPLY_TEXT = "I apologize, I could not process that request."
UNAVAILABLE_TEXT = "I am unable to access the health database at the moment."


def ask_health_assistant(
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
    text: str,
    history: list[Message],
    image: Optional[str] = None,
    mode: ChatMode = ChatMode.STANDARD,
) -> tuple[str, dict]:
    """Return (reply, meta). Never raises for remote failures."""
    system_prompt = prompts.build_system(mode=mode)
    content = prompts.build_user_content(
        text=text, history=history, image=image, mode=mode
    )
    messages = prompts.assemble(system=system_prompt, content=content)

    try:
        reply, meta = llm.chat(messages, settings)
    except Exception:
        logger.exception("Gemini API error (mode=%s)", mode.value)
        return UNAVAILABLE_TEXT, {"tokens_in": 0, "tokens_out": 0, "error": True}

    if not (reply or "").strip():
        logger.warning("Empty reply from model %s", settings.model)
        return EMPTY_REPLY_TEXT, meta
    return reply, meta
