"""Shared fixtures: fake LLM clients and stores (no network)."""

import pytest

from core.persistence.session_store import InMemorySessionStore, JsonFileSessionStore


class FakeLLM:
    """Records every call and answers with a fixed reply."""

    def __init__(self, reply="Stay hydrated and rest.", meta=None):
        self.reply = reply
        self.meta = meta if meta is not None else {
            "model": "gemini-2.5-flash",
            "tokens_in": 12,
            "tokens_out": 5,
        }
        self.calls = []

    def chat(self, messages, settings, system=None):
        self.calls.append({"messages": messages, "settings": settings})
        return self.reply, dict(self.meta)


class FailingLLM:
    def __init__(self, exc=None):
        self.exc = exc or ConnectionError("network down")
        self.calls = 0

    def chat(self, messages, settings, system=None):
        self.calls += 1
        raise self.exc


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def memory_store():
    return InMemorySessionStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileSessionStore(tmp_path / "data")


@pytest.fixture
def failing_llm():
    return FailingLLM()


@pytest.fixture
def empty_llm():
    return FakeLLM(reply="")
