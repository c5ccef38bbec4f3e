"""
Purpose: Guardrails applied to a consultation message before it leaves
the app. Fails early with a user-facing ValueError for empty or oversized
input and for prompt-injection phrasing; personal identifiers are masked
in the text sent to the model (the transcript keeps what the user typed).
"""

import re

# Order matters: SSNs would otherwise be caught by the phone pattern.
PII_PATTERNS = [
    ("EMAIL", re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.I)),
    ("SSN", re.compile(r"\b\d{3}-\d{2}-\d{4}\b")),
    ("CARD", re.compile(r"\b(?:\d[ -]*?){13,19}\b")),
    ("PHONE", re.compile(r"\+?\d[\d\s().-]{7,}\d")),
]

INJECTION_CUES = [
    "ignore previous",
    "ignore your instructions",
    "disregard previous",
    "system prompt",
    "system instruction",
    "you are no longer david",
    "new instructions:",
    "### system",
    "begin system",
]

MAX_INPUT_CHARS = 8000


class DefaultSecurity:
    def validate_user_input(self, text: str, *, has_image: bool = False) -> None:
        text = text or ""
        if not text.strip() and not has_image:
            raise ValueError("Please describe your question or attach a photo.")
        if len(text) > MAX_INPUT_CHARS:
            raise ValueError(
                f"Your message is too long ({len(text)} characters). "
                f"Please keep it under {MAX_INPUT_CHARS}."
            )

    def sanitize_for_prompt(self, text: str) -> str:
        return (text or "").replace("\x00", "").strip()

    def redact_pii(self, text: str) -> tuple[str, list[str]]:
        """Mask identifiers; returns the masked text and the labels found."""
        found: list[str] = []
        for label, rx in PII_PATTERNS:
            text, n = rx.subn(f"[{label}]", text)
            if n:
                found.append(label)
        return text, found

    def check_prompt_injection(self, text: str) -> None:
        lowered = (text or "").lower()
        cue = next((c for c in INJECTION_CUES if c in lowered), None)
        if cue:
            raise ValueError(
                "Please rephrase your health question.\n"
                f'It contains instruction-like phrasing ("{cue}").'
            )
