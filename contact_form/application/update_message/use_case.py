from __future__ import annotations

from dataclasses import replace

from contact_form.application.models import MessageConfirmation
from contact_form.application.validation.models import MessageRequest
from contact_form.domain.errors import MessageNotFoundError
from contact_form.domain.models.message import utc_now
from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.timing import log_execution

UPDATED = "Mensagem atualizada com sucesso."


def _extract_context(_self, message_id: str, request: MessageRequest) -> dict:
    return {"message_id": message_id}


class UpdateMessageUseCase:
    def __init__(self, repo: MessageRepository) -> None:
        self._repo = repo

    @log_execution("use_case.update_message", _extract_context)
    async def execute(self, message_id: str, request: MessageRequest) -> MessageConfirmation:
        existing = await self._repo.get(message_id)
        if existing is None:
            raise MessageNotFoundError(message_id)

        await self._repo.update(
            replace(
                existing,
                name=request.name,
                email=request.email,
                message=request.message,
                updated_at=utc_now(),
            )
        )
        return MessageConfirmation(id=message_id, message=UPDATED)
