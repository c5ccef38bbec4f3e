"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- Message (role, text, optional image, timestamp) and ChatSession.
- CaseDataPoint / TrendSummary for the trends dashboard.
- EducationTopic for the education hub.
- LLMSettings (model, temperature, top_p, max_tokens).

Persisted sessions keep the camelCase `createdAt` key so a saved list stays
readable by the browser build.

Testing: Trivial; mostly types. to_dict/from_dict are covered by store tests.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Any
from enum import Enum
import time
from datetime import date


def now_ms() -> int:
    """Current epoch time in milliseconds."""
    return int(time.time() * 1000)


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class ChatMode(str, Enum):
    STANDARD = "standard"
    SYMPTOM_CHECKER = "symptom_checker"


class ViewMode(str, Enum):
    CHAT = "chat"
    STATS = "stats"
    EDUCATION = "education"


class Timeframe(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class PointType(str, Enum):
    HISTORICAL = "historical"
    PREDICTION = "prediction"


@dataclass
class Message:
    role: Role
    text: str
    image: Optional[str] = None
    timestamp: int = field(default_factory=now_ms)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp,
        }
        if self.image:
            data["image"] = self.image
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        return cls(
            role=Role(data.get("role", Role.USER.value)),
            text=data.get("text") or "",
            image=data.get("image") or None,
            timestamp=int(data.get("timestamp") or 0),
        )


@dataclass
class ChatSession:
    id: str
    title: str
    messages: list[Message] = field(default_factory=list)
    created_at: int = field(default_factory=now_ms)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "messages": [m.to_dict() for m in self.messages],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatSession":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            messages=[Message.from_dict(m) for m in data.get("messages") or []],
            created_at=int(data.get("createdAt") or 0),
        )


@dataclass(frozen=True)
class CaseDataPoint:
    date: str
    cases: int
    type: PointType
    day: Optional[date] = None


@dataclass(frozen=True)
class TrendSummary:
    last_historical: int
    forecast_end: int
    change_pct: float
    label: str


@dataclass(frozen=True)
class EducationTopic:
    id: str
    title: str
    icon: str
    summary: str
    details: str


@dataclass
class LLMSettings:
    model: str
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 1024


@dataclass(frozen=True)
class Price:
    input_per_1M: float
    output_per_1M: float
