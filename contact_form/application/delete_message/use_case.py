from __future__ import annotations

from contact_form.application.models import MessageConfirmation
from contact_form.domain.errors import MessageNotFoundError
from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.timing import log_execution

DELETED = "Mensagem removida com sucesso."


def _extract_context(_self, message_id: str) -> dict:
    return {"message_id": message_id}


class DeleteMessageUseCase:
    def __init__(self, repo: MessageRepository) -> None:
        self._repo = repo

    @log_execution("use_case.delete_message", _extract_context)
    async def execute(self, message_id: str) -> MessageConfirmation:
        if await self._repo.get(message_id) is None:
            raise MessageNotFoundError(message_id)

        await self._repo.delete(message_id)
        return MessageConfirmation(id=message_id, message=DELETED)
