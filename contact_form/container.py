from __future__ import annotations

from dependency_injector import containers, providers
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from google.cloud import firestore

from contact_form.application.create_message.use_case import CreateMessageUseCase
from contact_form.application.delete_message.use_case import DeleteMessageUseCase
from contact_form.application.list_messages.use_case import ListMessagesUseCase
from contact_form.application.update_message.use_case import UpdateMessageUseCase
from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.firestore.client import build_firestore_client
from contact_form.infrastructure.firestore.message_repository_firestore import (
    FirestoreMessageRepository,
)


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
            "contact_form.container",
        ],
    )

    config = providers.Configuration()

    # Built once; concurrent first requests share the same instance
    firestore_client = providers.ThreadSafeSingleton(
        build_firestore_client,
        credentials_path=config.credentials_path,
        bundled_credentials_path=config.bundled_credentials_path,
        database_id=config.database_id,
    )


@inject
async def get_firestore_client(
    client: firestore.AsyncClient = Depends(Provide[Container.firestore_client]),
) -> firestore.AsyncClient:
    return client


@inject
async def get_message_repository(
    client: firestore.AsyncClient = Depends(get_firestore_client),
    collection_name: str = Depends(Provide[Container.config.collection_name]),
) -> MessageRepository:
    return FirestoreMessageRepository(client, collection_name)


async def get_create_message_use_case(
    repo: MessageRepository = Depends(get_message_repository),
) -> CreateMessageUseCase:
    return CreateMessageUseCase(repo)


async def get_list_messages_use_case(
    repo: MessageRepository = Depends(get_message_repository),
) -> ListMessagesUseCase:
    return ListMessagesUseCase(repo)


async def get_update_message_use_case(
    repo: MessageRepository = Depends(get_message_repository),
) -> UpdateMessageUseCase:
    return UpdateMessageUseCase(repo)


async def get_delete_message_use_case(
    repo: MessageRepository = Depends(get_message_repository),
) -> DeleteMessageUseCase:
    return DeleteMessageUseCase(repo)
