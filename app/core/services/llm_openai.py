"""
Purpose: Thin client wrapper around the Gemini API through its
OpenAI-compatible endpoint. One place for auth, model options and
response/usage normalization.

Extensibility:
- Any OpenAI-compatible backend works by changing base_url.
- Add streaming support later (yield tokens) behind the same interface.

Testing: Mock SDK calls; assert it maps usage and content parts correctly.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from openai import OpenAI

from ..config import GEMINI_OPENAI_BASE_URL
from ..models import LLMSettings

logger = logging.getLogger(__name__)


class OpenAILLMClient:
    def __init__(self, api_key: str, base_url: str = GEMINI_OPENAI_BASE_URL):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY")
        try:
            self.client = OpenAI(api_key=self.api_key, base_url=base_url)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Gemini client: {e}") from e

    def chat(
        self,
        messages: list[dict[str, Any]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]:
        payload: list[dict[str, Any]] = []
        if system:
            payload.append({"role": "system", "content": system})
        payload.extend(messages)

        logger.debug("chat request model=%s messages=%d", settings.model, len(payload))
        cc = self.client.chat.completions.create(
            model=settings.model,
            messages=payload,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
        )
        text = cc.choices[0].message.content if cc.choices else None
        usage = getattr(cc, "usage", None)
        tokens_in = getattr(usage, "prompt_tokens", 0) if usage else 0
        tokens_out = getattr(usage, "completion_tokens", 0) if usage else 0
        return text or "", {
            "model": getattr(cc, "model", None) or settings.model,
            "tokens_in": tokens_in or 0,
            "tokens_out": tokens_out or 0,
        }
