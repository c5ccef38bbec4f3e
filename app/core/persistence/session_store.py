"""
Purpose: Chat session storage under a single key.
Why: Reopen consultations after a restart, bulk clear.

What is inside:
InMemorySessionStore with load/save/clear (tests, ephemeral runs).
JsonFileSessionStore: the whole session list serialized as one JSON array
in <data_dir>/<key>.json, replaced atomically on save.
session_key_for(): one key per browser, so visitors never share a file.

Testing:
In-memory: simple state tests.
JSON file: tmp_path fixture; missing, corrupt and interrupted-write cases.
"""

from __future__ import annotations
import json
import logging
import os
import re
import tempfile
from pathlib import Path

from ..config import SESSIONS_KEY
from ..models import ChatSession

logger = logging.getLogger(__name__)

CLIENT_ID_RE = re.compile(r"^[A-Za-z0-9_-]{16,64}$")


def session_key_for(client_id: str, base: str = SESSIONS_KEY) -> str:
    """Storage key for one browser; rejects ids that are not safe file names."""
    if not CLIENT_ID_RE.match(client_id or ""):
        raise ValueError(f"Invalid client id: {client_id!r}")
    return f"{base}_{client_id}"


class InMemorySessionStore:
    def __init__(self) -> None:
        self._sessions: list[dict] = []

    def load(self) -> list[ChatSession]:
        return [ChatSession.from_dict(s) for s in self._sessions]

    def save(self, sessions: list[ChatSession]) -> None:
        self._sessions = [s.to_dict() for s in sessions]

    def clear(self) -> None:
        self._sessions = []


class JsonFileSessionStore:
    def __init__(self, data_dir: str | Path = "data", key: str = SESSIONS_KEY) -> None:
        self.path = Path(data_dir) / f"{key}.json"

    def load(self) -> list[ChatSession]:
        """Return saved sessions, or [] when nothing usable is stored."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError("stored value is not a list")
            return [ChatSession.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable session store %s: %s", self.path, e)
            return []

    def save(self, sessions: list[ChatSession]) -> None:
        """Write to a sibling temp file, then swap it in; the old file survives failures."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [s.to_dict() for s in sessions]
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
