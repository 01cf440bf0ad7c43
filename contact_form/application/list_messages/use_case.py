from __future__ import annotations

from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.timing import log_execution

from .models import MessageItem


class ListMessagesUseCase:
    def __init__(self, repo: MessageRepository) -> None:
        self._repo = repo

    @log_execution("use_case.list_messages")
    async def execute(self) -> list[MessageItem]:
        messages = await self._repo.list_all()
        return [
            MessageItem(
                id=m.id,
                name=m.name,
                email=m.email,
                message=m.message,
                created_at=m.created_at,
            )
            for m in messages
        ]
