"""
Central configuration for the health assistant.

Everything can be overridden from the environment:

- GEMINI_API_KEY: key for the Gemini API (VITE_GEMINI_API_KEY is accepted too).
- GEMINI_BASE_URL: OpenAI-compatible endpoint of the Gemini API.
- DAVID_AI_MODEL: model used for chat turns.
- DAVID_AI_TEMPERATURE: sampling temperature for chat turns.
- DAVID_AI_DATA_DIR: directory holding the persisted sessions.
- DAVID_AI_LOG_LEVEL / DAVID_AI_LOG_FILE: logging setup.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.7
SESSIONS_KEY = "david_ai_sessions"


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    try:
        return float(env.get(name, default))
    except ValueError:
        return default


@dataclass
class AppConfig:
    api_key: Optional[str] = None
    base_url: str = GEMINI_OPENAI_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    data_dir: str = "data"
    sessions_key: str = SESSIONS_KEY
    log_level: str = "INFO"
    log_file: str = "logs/david_ai.log"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env
        api_key = (
            env.get("GEMINI_API_KEY") or env.get("VITE_GEMINI_API_KEY") or ""
        ).strip()
        return cls(
            api_key=api_key or None,
            base_url=env.get("GEMINI_BASE_URL", GEMINI_OPENAI_BASE_URL),
            model=env.get("DAVID_AI_MODEL", DEFAULT_MODEL),
            temperature=_float_env(env, "DAVID_AI_TEMPERATURE", DEFAULT_TEMPERATURE),
            data_dir=env.get("DAVID_AI_DATA_DIR", "data"),
            log_level=env.get("DAVID_AI_LOG_LEVEL", "INFO"),
            log_file=env.get("DAVID_AI_LOG_FILE", "logs/david_ai.log"),
        )
