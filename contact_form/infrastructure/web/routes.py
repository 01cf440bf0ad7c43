from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from contact_form.application.create_message.use_case import CreateMessageUseCase
from contact_form.application.delete_message.use_case import DeleteMessageUseCase
from contact_form.application.list_messages.models import MessageItem
from contact_form.application.list_messages.use_case import ListMessagesUseCase
from contact_form.application.models import MessageConfirmation
from contact_form.application.update_message.use_case import UpdateMessageUseCase
from contact_form.application.validation.models import MessageRequest
from contact_form.container import (
    get_create_message_use_case,
    get_delete_message_use_case,
    get_list_messages_use_case,
    get_update_message_use_case,
)
from contact_form.infrastructure.web.errors import ErrorResponse, Operation, translate_errors

router = APIRouter(prefix="/api", tags=["messages"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Message not found"}}
_FAILED = {500: {"model": ErrorResponse, "description": "Storage failure or interrupted call"}}
_INVALID = {422: {"description": "Validation error - missing, blank or oversized fields"}}


@router.post(
    "/messages",
    status_code=201,
    summary="Submit a contact message",
    description="Validate and store a new message. `createdAt` is assigned by the server.",
    response_model=MessageConfirmation,
    responses={
        201: {
            "description": "Message stored",
            "content": {
                "application/json": {
                    "example": {"id": "abc123", "message": "Mensagem registrada com sucesso."}
                }
            },
        },
        **_INVALID,
        **_FAILED,
    },
)
async def create_message(
    body: MessageRequest,
    uc: CreateMessageUseCase = Depends(get_create_message_use_case),
):
    with translate_errors(Operation.CREATE):
        return await uc.execute(body)


@router.get(
    "/messages",
    summary="List contact messages",
    description="All stored messages, most recent `createdAt` first.",
    response_model=list[MessageItem],
    responses={**_FAILED},
)
async def list_messages(
    uc: ListMessagesUseCase = Depends(get_list_messages_use_case),
):
    with translate_errors(Operation.LIST):
        return await uc.execute()


@router.put(
    "/messages/{message_id}",
    summary="Update a contact message",
    description="Overwrite name, email and message and stamp `updatedAt`. `createdAt` is kept.",
    response_model=MessageConfirmation,
    responses={**_NOT_FOUND, **_INVALID, **_FAILED},
)
async def update_message(
    body: MessageRequest,
    message_id: str = Path(..., description="Document id returned on creation"),
    uc: UpdateMessageUseCase = Depends(get_update_message_use_case),
):
    with translate_errors(Operation.UPDATE):
        return await uc.execute(message_id, body)


@router.delete(
    "/messages/{message_id}",
    summary="Delete a contact message",
    description="Permanently remove a message.\n\n**Warning:** This operation is irreversible.",
    response_model=MessageConfirmation,
    responses={**_NOT_FOUND, **_FAILED},
)
async def delete_message(
    message_id: str = Path(..., description="Document id returned on creation"),
    uc: DeleteMessageUseCase = Depends(get_delete_message_use_case),
):
    with translate_errors(Operation.DELETE):
        return await uc.execute(message_id)
