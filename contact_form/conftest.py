"""Shared test fixtures for the contact_form package."""
from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from contact_form.domain.models.message import Message
from contact_form.domain.ports.message_repository import MessageRepository


def make_message(**overrides) -> Message:
    """Factory for creating test Message objects with sensible defaults."""
    defaults = dict(
        id=uuid.uuid4().hex,
        name="Ana",
        email="ana@example.com",
        message="Olá",
        created_at=datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc),
    )
    defaults.update(overrides)
    return Message(**defaults)


class InMemoryMessageRepository(MessageRepository):
    """Dict-backed stand-in for Firestore, ids assigned like the real store."""

    def __init__(self) -> None:
        self.documents: dict[str, Message] = {}

    def seed(self, *messages: Message) -> None:
        for m in messages:
            self.documents[m.id] = m

    async def add(self, message: Message) -> Message:
        saved = replace(message, id=uuid.uuid4().hex[:20])
        self.documents[saved.id] = saved
        return saved

    async def list_all(self) -> list[Message]:
        with_ts = [m for m in self.documents.values() if m.created_at is not None]
        return sorted(with_ts, key=lambda m: m.created_at, reverse=True)

    async def get(self, message_id: str) -> Message | None:
        return self.documents.get(message_id)

    async def update(self, message: Message) -> None:
        self.documents[message.id] = message

    async def delete(self, message_id: str) -> None:
        del self.documents[message_id]


@pytest.fixture
def memory_repo() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()


@pytest.fixture
def mock_repo():
    """Async mock repository for unit tests."""
    return AsyncMock(spec=MessageRepository)
