from __future__ import annotations

import abc

from contact_form.domain.models.message import Message


class MessageRepository(abc.ABC):
    @abc.abstractmethod
    async def add(self, message: Message) -> Message:
        """Insert a new document and return the message with its assigned id."""

    @abc.abstractmethod
    async def list_all(self) -> list[Message]:
        """All messages, most recently created first."""

    @abc.abstractmethod
    async def get(self, message_id: str) -> Message | None: ...

    @abc.abstractmethod
    async def update(self, message: Message) -> None:
        """Overwrite name, email, message and updated_at of an existing document."""

    @abc.abstractmethod
    async def delete(self, message_id: str) -> None: ...
