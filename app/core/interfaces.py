"""
Abstractions for pluggable services. Inversion of control: core depends
on interfaces, not concrete services. Enables fakes/mocks and future swaps.
Protocols define what services or components can do,
without saying how they do it.

Common protocols:
- LLMClient.chat(messages, settings) -> (reply, meta)
- PromptFactory.build_system(mode) -> str & build_user_content(...) / assemble(...)
- SecurityGuard.validate_user_input(text) / redact_pii(text)
- SessionStore.load() / save(sessions) / clear()

Testing: Use simple fake implementations to test the controller without network calls.
"""

from __future__ import annotations
from typing import Any, Optional, Protocol
from .models import ChatMode, ChatSession, LLMSettings, Message


class LLMClient(Protocol):
    def chat(
        self,
        messages: list[dict[str, Any]],
        settings: LLMSettings,
        system: Optional[str] = None,
    ) -> tuple[str, dict]: ...


class PromptFactory(Protocol):

    def build_system(self, *, mode: ChatMode) -> str: ...

    def build_user_content(
        self,
        *,
        text: str,
        history: list[Message],
        image: Optional[str] = None,
        mode: ChatMode = ChatMode.STANDARD,
    ) -> str | list[dict[str, Any]]: ...

    def assemble(
        self, *, system: str, content: str | list[dict[str, Any]]
    ) -> list[dict[str, Any]]: ...

    def greeting_text(self) -> str: ...


class SecurityGuard(Protocol):
    def validate_user_input(self, text: str, *, has_image: bool = False) -> None: ...

    def sanitize_for_prompt(self, text: str) -> str: ...

    def redact_pii(self, text: str) -> tuple[str, list[str]]: ...

    def check_prompt_injection(self, text: str) -> None: ...


class SessionStore(Protocol):
    def load(self) -> list[ChatSession]: ...

    def save(self, sessions: list[ChatSession]) -> None: ...

    def clear(self) -> None: ...
