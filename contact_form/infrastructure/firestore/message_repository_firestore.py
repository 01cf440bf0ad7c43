from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from typing import Any

import structlog
from google.api_core import exceptions as api_exceptions
from google.cloud import firestore

from contact_form.domain.errors import StorageError, StorageInterruptedError
from contact_form.domain.models.message import Message
from contact_form.domain.ports.message_repository import MessageRepository
from contact_form.infrastructure.settings import COLLECTION_NAME
from contact_form.infrastructure.timing import timed_operation

log = structlog.stdlib.get_logger()

# Document field names
NAME = "name"
EMAIL = "email"
MESSAGE = "message"
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"


@contextmanager
def _storage_errors(operation: str, **context: Any):
    """Translate Firestore client errors into storage errors.

    A cancelled RPC becomes StorageInterruptedError. asyncio.CancelledError is
    not a GoogleAPIError and passes through untouched.
    """
    try:
        yield
    except api_exceptions.Cancelled as e:
        log.warning(f"{operation}.interrupted", error=str(e), **context)
        raise StorageInterruptedError(str(e)) from e
    except api_exceptions.GoogleAPIError as e:
        log.error(
            f"{operation}.failed",
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        raise StorageError(str(e)) from e


class FirestoreMessageRepository(MessageRepository):
    def __init__(self, client: firestore.AsyncClient, collection_name: str = COLLECTION_NAME) -> None:
        self._collection = client.collection(collection_name)

    async def add(self, message: Message) -> Message:
        with _storage_errors("db.add"), timed_operation("db.add"):
            _, reference = await self._collection.add(
                {
                    NAME: message.name,
                    EMAIL: message.email,
                    MESSAGE: message.message,
                    CREATED_AT: message.created_at,
                }
            )
        log.debug("db.add.result", message_id=reference.id)
        return replace(message, id=reference.id)

    async def list_all(self) -> list[Message]:
        with _storage_errors("db.list_all"), timed_operation("db.list_all") as timing:
            query = self._collection.order_by(CREATED_AT, direction=firestore.Query.DESCENDING)
            results = [self._to_domain(snapshot) async for snapshot in query.stream()]

        log.debug(
            "db.list_all.results",
            returned=len(results),
            elapsed_ms=timing.get("elapsed_ms"),
        )
        return results

    async def get(self, message_id: str) -> Message | None:
        with _storage_errors("db.get", message_id=message_id), timed_operation("db.get", message_id=message_id):
            snapshot = await self._collection.document(message_id).get()
        if not snapshot.exists:
            return None
        return self._to_domain(snapshot)

    async def update(self, message: Message) -> None:
        with _storage_errors("db.update", message_id=message.id), timed_operation("db.update", message_id=message.id):
            await self._collection.document(message.id).update(
                {
                    NAME: message.name,
                    EMAIL: message.email,
                    MESSAGE: message.message,
                    UPDATED_AT: message.updated_at,
                }
            )

    async def delete(self, message_id: str) -> None:
        with _storage_errors("db.delete", message_id=message_id), timed_operation("db.delete", message_id=message_id):
            await self._collection.document(message_id).delete()

    @staticmethod
    def _to_domain(snapshot) -> Message:
        data = snapshot.to_dict() or {}
        return Message(
            id=snapshot.id,
            name=data.get(NAME),
            email=data.get(EMAIL),
            message=data.get(MESSAGE),
            # Documents written by older clients may lack timestamps
            created_at=data.get(CREATED_AT),
            updated_at=data.get(UPDATED_AT),
        )
