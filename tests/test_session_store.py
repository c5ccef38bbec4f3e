"""Session store tests: JSON file under one key, plus the in-memory store."""

import json

import pytest

from core.controller import ConsultationController
from core.models import ChatSession, Message, Role
from core.persistence import session_store
from core.persistence.session_store import (
    InMemorySessionStore,
    JsonFileSessionStore,
    session_key_for,
)


def _session(sid="s1"):
    return ChatSession(
        id=sid,
        title="New Consultation",
        messages=[
            Message(Role.MODEL, "Hello", timestamp=1000),
            Message(Role.USER, "scan", image="data:image/jpeg;base64,QUJD", timestamp=2000),
        ],
        created_at=1000,
    )


def test_missing_file_loads_empty(file_store):
    assert file_store.load() == []


def test_save_and_load(file_store):
    file_store.save([_session("a"), _session("b")])

    loaded = file_store.load()

    assert [s.id for s in loaded] == ["a", "b"]
    assert loaded[0].messages[1].image == "data:image/jpeg;base64,QUJD"
    assert loaded[0].messages[0].role == Role.MODEL
    assert loaded[0].created_at == 1000


def test_file_uses_browser_compatible_shape(file_store):
    file_store.save([_session()])

    raw = json.loads(file_store.path.read_text(encoding="utf-8"))

    assert file_store.path.name == "david_ai_sessions.json"
    assert raw[0]["createdAt"] == 1000
    assert raw[0]["messages"][0] == {"role": "model", "text": "Hello", "timestamp": 1000}
    assert "image" not in raw[0]["messages"][0]


def test_corrupt_file_is_treated_as_empty(file_store):
    file_store.path.parent.mkdir(parents=True, exist_ok=True)
    file_store.path.write_text("{not json", encoding="utf-8")

    assert file_store.load() == []


def test_non_list_value_is_treated_as_empty(file_store):
    file_store.path.parent.mkdir(parents=True, exist_ok=True)
    file_store.path.write_text('{"id": "x"}', encoding="utf-8")

    assert file_store.load() == []


def test_clear_removes_file(file_store):
    file_store.save([_session()])
    file_store.clear()

    assert not file_store.path.exists()
    assert file_store.load() == []
    file_store.clear()


def test_custom_key(tmp_path):
    store = JsonFileSessionStore(tmp_path, key="other")
    store.save([_session()])
    assert (tmp_path / "other.json").exists()


def test_in_memory_store_copies_on_save():
    store = InMemorySessionStore()
    session = _session()
    store.save([session])

    session.messages.append(Message(Role.USER, "later"))

    assert len(store.load()[0].messages) == 2
    store.clear()
    assert store.load() == []


def test_interrupted_save_keeps_previous_file(file_store, monkeypatch):
    file_store.save([_session("kept")])

    def broken_dump(obj, f, **kwargs):
        f.write('[{"id": "half')
        raise OSError("No space left on device")

    monkeypatch.setattr(session_store.json, "dump", broken_dump)
    with pytest.raises(OSError):
        file_store.save([_session("new")])
    monkeypatch.undo()

    assert [s.id for s in file_store.load()] == ["kept"]
    assert [p.name for p in file_store.path.parent.iterdir()] == [file_store.path.name]


def test_session_key_per_client():
    client = "a" * 32
    assert session_key_for(client) == f"david_ai_sessions_{client}"
    assert session_key_for(client, "custom") == f"custom_{client}"


@pytest.mark.parametrize("client_id", ["", "short", "../../etc/passwd0000", "a b" * 8])
def test_session_key_rejects_unsafe_ids(client_id):
    with pytest.raises(ValueError):
        session_key_for(client_id)


def test_browsers_do_not_share_history(tmp_path, fake_llm):
    store_a = JsonFileSessionStore(tmp_path, session_key_for("a" * 32))
    store_b = JsonFileSessionStore(tmp_path, session_key_for("b" * 32))
    tab_a = ConsultationController(fake_llm, store_a)
    tab_b = ConsultationController(fake_llm, store_b)

    tab_a.send_message("my private symptom from tab A")
    tab_b.send_message("question from tab B")
    tab_b.clear_history()

    reopened_a = JsonFileSessionStore(tmp_path, session_key_for("a" * 32))
    texts_a = [m.text for m in reopened_a.load()[0].messages]
    assert "my private symptom from tab A" in texts_a
    texts_b = [m.text for s in store_b.load() for m in s.messages]
    assert "my private symptom from tab A" not in texts_b
    assert len(store_b.load()) == 1
