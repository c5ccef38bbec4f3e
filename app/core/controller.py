"""
Purpose: The single orchestration point for consultations. Owns the session
list, the current session and the in-flight flag. It centralizes "one-turn"
logic and session lifecycle (create, select, send, clear).
Prevents UI from knowing how prompts/LLM/storage work.

Key responsibilities:
- Load sessions from the store on start; always keep a current session.
- Apply guardrails (services.security) to the text sent to the model.
- Append the user message, call the assistant (services.health_assistant),
  append the reply and persist after each mutation.
- Keep the symptom-checker mode active for a session once started.
- clear_history() drops everything and starts over with one new session.

Testing: Pure unit tests with fakes: fake LLMClient and InMemorySessionStore.
Verify ordering, titles, mode selection and the in-flight gate.
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import replace
from typing import Optional

from .models import ChatMode, ChatSession, LLMSettings, Message, Role, now_ms
from .interfaces import LLMClient, PromptFactory, SecurityGuard, SessionStore
from .prompts import DefaultPromptFactory
from .prompts.symptom_checker import START_SYMPTOM_CHECK, display_text
from .services.health_assistant import ask_health_assistant
from .services.security import DefaultSecurity
from .config import DEFAULT_MODEL

logger = logging.getLogger(__name__)

NEW_SESSION_TITLE = "New Consultation"
HEALTH_SCAN_TITLE = "Health Scan"
HEALTH_SCAN_PROMPT = (
    "Please check my temperature and health status based on this image."
)
TITLE_MAX_CHARS = 30


class ConsultationController:
    def __init__(
        self,
        llm: Optional[LLMClient],
        store: SessionStore,
        settings: Optional[LLMSettings] = None,
    ):
        self.llm: Optional[LLMClient] = llm
        self.store: SessionStore = store
        self.settings = settings or LLMSettings(model=DEFAULT_MODEL)
        self.prompts: PromptFactory = DefaultPromptFactory()
        self.security: SecurityGuard = DefaultSecurity()

        self.sessions: list[ChatSession] = []
        self.current_session_id: Optional[str] = None
        self.is_loading: bool = False
        self._modes: dict[str, ChatMode] = {}

        self.tokens_in: int = 0
        self.tokens_out: int = 0
        self.model_used: Optional[str] = None

        self._load()

    def _load(self) -> None:
        self.sessions = self.store.load()
        if self.sessions:
            self.current_session_id = self.sessions[0].id
            logger.info("Loaded %d saved sessions", len(self.sessions))
        else:
            self.create_new_session()

    def _persist(self) -> None:
        try:
            self.store.save(self.sessions)
        except OSError:
            logger.exception("Could not persist sessions")

    def is_ready(self) -> bool:
        """True if the controller is ready to chat (has an LLM)."""
        return self.llm is not None

    def create_new_session(self) -> ChatSession:
        """Prepend a seeded session and make it current."""
        session = ChatSession(
            id=uuid.uuid4().hex,
            title=NEW_SESSION_TITLE,
            messages=[Message(role=Role.MODEL, text=self.prompts.greeting_text())],
            created_at=now_ms(),
        )
        self.sessions.insert(0, session)
        self.current_session_id = session.id
        self._persist()
        logger.info("Created session %s", session.id)
        return session

    def get_current_session(self) -> Optional[ChatSession]:
        return next(
            (s for s in self.sessions if s.id == self.current_session_id), None
        )

    def select_session(self, session_id: str) -> ChatSession:
        session = next((s for s in self.sessions if s.id == session_id), None)
        if session is None:
            raise KeyError(f"Unknown session: {session_id}")
        self.current_session_id = session.id
        return session

    def get_history(self) -> list[Message]:
        """Messages of the current session (empty if none)."""
        session = self.get_current_session()
        return session.messages if session else []

    def _prompt_history(self, messages: list[Message]) -> list[Message]:
        """Copies of the stored messages with identifiers masked for the model."""
        return [
            replace(m, text=self.security.redact_pii(m.text)[0]) for m in messages
        ]

    def current_mode(self) -> ChatMode:
        return self._modes.get(self.current_session_id or "", ChatMode.STANDARD)

    def send_message(
        self,
        text: str,
        image: Optional[str] = None,
        mode: Optional[ChatMode] = None,
    ) -> Optional[str]:
        """
        One consultation turn. Returns the model reply, or None when the turn
        was skipped (blank input, no session, or a request already in flight).
        Guardrail violations raise ValueError before anything is appended.
        """
        text = text or ""
        session = self.get_current_session()
        if (not text.strip() and not image) or session is None or self.is_loading:
            return None
        if not self.is_ready():
            raise RuntimeError("Assistant is not configured. Add an API key first.")

        shown = display_text(text)
        effective_mode = mode or self.current_mode()

        self.security.validate_user_input(text, has_image=bool(image))
        outgoing = self.security.sanitize_for_prompt(text)
        outgoing, pii = self.security.redact_pii(outgoing)
        if pii:
            logger.info("Redacted %s before sending", ", ".join(pii))
        self.security.check_prompt_injection(outgoing)

        history = self._prompt_history(session.messages)
        is_first_turn = len(session.messages) <= 1
        session.messages.append(Message(role=Role.USER, text=shown, image=image))
        self._persist()

        self.is_loading = True
        try:
            reply, meta = ask_health_assistant(
                llm=self.llm,
                prompts=self.prompts,
                settings=self.settings,
                text=outgoing,
                history=history,
                image=image,
                mode=effective_mode,
            )
        finally:
            self.is_loading = False

        if is_first_turn:
            session.title = (shown[:TITLE_MAX_CHARS] or HEALTH_SCAN_TITLE) + "..."
        session.messages.append(Message(role=Role.MODEL, text=reply))
        self._persist()

        self.tokens_in += int(meta.get("tokens_in", 0))
        self.tokens_out += int(meta.get("tokens_out", 0))
        self.model_used = meta.get("model") or self.settings.model
        return reply

    def start_symptom_check(self) -> Optional[str]:
        """Switch the current session to triage mode and ask the first question."""
        if self.get_current_session() is None:
            self.create_new_session()
        self._modes[self.current_session_id] = ChatMode.SYMPTOM_CHECKER
        return self.send_message(START_SYMPTOM_CHECK, mode=ChatMode.SYMPTOM_CHECKER)

    def end_symptom_check(self) -> None:
        self._modes.pop(self.current_session_id or "", None)

    def handle_camera_capture(self, image: str) -> Optional[str]:
        """Send a captured frame for a visual health check."""
        return self.send_message(HEALTH_SCAN_PROMPT, image=image, mode=ChatMode.STANDARD)

    def clear_history(self) -> ChatSession:
        """Delete all sessions and reset to exactly one new session."""
        self.sessions = []
        self._modes.clear()
        self.current_session_id = None
        self.store.clear()
        logger.info("Cleared all sessions")
        return self.create_new_session()
