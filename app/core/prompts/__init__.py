"""Facade that keeps prompt selection behind one DefaultPromptFactory API."""

from __future__ import annotations
from typing import Any, Optional
from ..models import ChatMode, Message
from . import assistant as _assistant
from . import symptom_checker as _symptom
from .common import (
    assemble as _assemble,
    context_block,
    image_parts,
)


class DefaultPromptFactory:
    # SYSTEM
    def build_system(self, *, mode: ChatMode) -> str:
        if mode == ChatMode.SYMPTOM_CHECKER:
            return _symptom.build_symptom_checker_system()
        return _assistant.build_assistant_system()

    def greeting_text(self) -> str:
        return _assistant.greeting_text()

    # USER TURN
    def build_user_content(
        self,
        *,
        text: str,
        history: list[Message],
        image: Optional[str] = None,
        mode: ChatMode = ChatMode.STANDARD,
    ) -> str | list[dict[str, Any]]:
        """
        Image turns go out as multimodal parts without history.
        Text turns are a single string prefixed with the recent context.
        """
        if image:
            return image_parts(image, text)

        if mode == ChatMode.SYMPTOM_CHECKER and text == _symptom.START_SYMPTOM_CHECK:
            body = _symptom.start_instruction()
        else:
            body = text
        return context_block(history) + body

    def assemble(
        self, *, system: str, content: str | list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        return _assemble(system=system, content=content)
