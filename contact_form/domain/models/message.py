from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Message:
    name: str
    email: str
    message: str
    # Assigned by the database on insert
    id: str | None = None
    created_at: datetime | None = field(default_factory=utc_now)
    updated_at: datetime | None = None
