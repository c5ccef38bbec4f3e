"""AppConfig.from_env with explicit mappings."""

from core.config import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    GEMINI_OPENAI_BASE_URL,
    AppConfig,
)


def test_defaults():
    config = AppConfig.from_env({})

    assert config.api_key is None
    assert config.base_url == GEMINI_OPENAI_BASE_URL
    assert config.model == DEFAULT_MODEL
    assert config.temperature == DEFAULT_TEMPERATURE
    assert config.data_dir == "data"
    assert config.sessions_key == "david_ai_sessions"


def test_overrides():
    config = AppConfig.from_env(
        {
            "GEMINI_API_KEY": " secret ",
            "DAVID_AI_MODEL": "gemini-2.5-pro",
            "DAVID_AI_TEMPERATURE": "0.2",
            "DAVID_AI_DATA_DIR": "/tmp/david",
            "DAVID_AI_LOG_LEVEL": "DEBUG",
        }
    )

    assert config.api_key == "secret"
    assert config.model == "gemini-2.5-pro"
    assert config.temperature == 0.2
    assert config.data_dir == "/tmp/david"
    assert config.log_level == "DEBUG"


def test_vite_key_is_accepted():
    assert AppConfig.from_env({"VITE_GEMINI_API_KEY": "k"}).api_key == "k"


def test_invalid_temperature_falls_back():
    config = AppConfig.from_env({"DAVID_AI_TEMPERATURE": "warm"})
    assert config.temperature == DEFAULT_TEMPERATURE
