from __future__ import annotations

from contact_form.application.models import MessageConfirmation
from contact_form.application.validation.models import MessageRequest
from contact_form.domain.models.message import Message
from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.timing import log_execution

CREATED = "Mensagem registrada com sucesso."


class CreateMessageUseCase:
    def __init__(self, repo: MessageRepository) -> None:
        self._repo = repo

    @log_execution("use_case.create_message")
    async def execute(self, request: MessageRequest) -> MessageConfirmation:
        message = Message(
            name=request.name,
            email=request.email,
            message=request.message,
        )
        saved = await self._repo.add(message)
        return MessageConfirmation(id=saved.id, message=CREATED)
