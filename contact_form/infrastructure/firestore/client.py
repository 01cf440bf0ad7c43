from __future__ import annotations

import structlog
from google.cloud import firestore

from contact_form.domain.errors import ConfigurationError
from contact_form.infrastructure.firestore.credentials import (
    resolve_credentials,
    resolve_project_id,
)

log = structlog.stdlib.get_logger()


def build_firestore_client(
    credentials_path: str | None,
    bundled_credentials_path: str | None,
    database_id: str | None = None,
) -> firestore.AsyncClient:
    """Build the process-wide Firestore client.

    Called once by the container; request handlers receive the same instance.
    An empty ``database_id`` targets the project's ``(default)`` database.
    """
    resolved = resolve_credentials(credentials_path, bundled_credentials_path)
    project_id = resolve_project_id(resolved)

    if not project_id:
        log.warning("firestore.client.project_id_missing", hint="the SDK will try to infer it")
    if database_id:
        log.info("firestore.client.database", database_id=database_id)

    try:
        client = firestore.AsyncClient(
            project=project_id or None,
            credentials=resolved.credentials,
            database=database_id or None,
        )
    except OSError as e:
        # Raised by google-cloud-core when no project can be inferred
        raise ConfigurationError(str(e)) from e

    log.info(
        "firestore.client.initialized",
        project_id=client.project,
        database_id=database_id or "(default)",
        credentials_source=resolved.source,
    )
    return client
