"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations
from typing import Any, Optional

from ..models import Message
from ..utils.images import as_jpeg_data_url

CONTEXT_MESSAGES = 2
VISUAL_CHECK_TAG = "[Visual Health Check Requested]"
VISUAL_CHECK_DEFAULT = "Analyze health status."


def context_block(history: list[Message], *, max_messages: int = CONTEXT_MESSAGES) -> str:
    if not history:
        return ""
    recent = history[-max_messages:]
    lines = [f"{m.role.value}: {m.text}" for m in recent]
    return "Previous context:\n" + "\n".join(lines) + "\n\n"


def image_parts(image: str, text: Optional[str]) -> list[dict[str, Any]]:
    return [
        {"type": "image_url", "image_url": {"url": as_jpeg_data_url(image)}},
        {"type": "text", "text": f"{VISUAL_CHECK_TAG} {text or VISUAL_CHECK_DEFAULT}"},
    ]


def assemble(
    *, system: str, content: str | list[dict[str, Any]]
) -> list[dict[str, Any]]:
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": content},
    ]
