"""Locate the credentials used to authenticate the Firestore client.

Sources are tried in a fixed order and the first one that loads wins:

1. the file named by ``FIREBASE_CREDENTIALS`` (a missing file is fatal),
2. the service-account key bundled with the package,
3. Application Default Credentials (``GOOGLE_APPLICATION_CREDENTIALS``,
   gcloud user credentials, or the metadata server).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import google.auth
import structlog
from google.auth import exceptions as auth_exceptions
from google.auth.credentials import Credentials

from contact_form.domain.errors import ConfigurationError

log = structlog.stdlib.get_logger()

PROJECT_ENV_VARS = ("GOOGLE_CLOUD_PROJECT", "GCLOUD_PROJECT")

NO_CREDENTIALS_HELP = (
    "Não foi possível localizar as credenciais do Firebase. Configure uma das opções:\n"
    "- Defina a variável FIREBASE_CREDENTIALS com o caminho do arquivo de credenciais\n"
    "- Adicione firebase-service-account.json em contact_form/resources\n"
    "- Configure a variável GOOGLE_APPLICATION_CREDENTIALS"
)


@dataclass(frozen=True)
class ResolvedCredentials:
    credentials: Credentials
    # Project embedded in the credentials, when they carry one
    project_id: str | None
    source: str


def _load_file(path: str, source: str) -> ResolvedCredentials:
    try:
        credentials, project_id = google.auth.load_credentials_from_file(path)
    except auth_exceptions.DefaultCredentialsError as e:
        raise ConfigurationError(f"Credenciais inválidas em {path}: {e}") from e
    return ResolvedCredentials(credentials, project_id, source)


def resolve_credentials(credentials_path: str | None, bundled_path: str | None) -> ResolvedCredentials:
    if credentials_path:
        if not Path(credentials_path).exists():
            raise ConfigurationError(
                f"Arquivo de credenciais não encontrado em: {credentials_path}"
            )
        log.info("credentials.loading", source="path", path=credentials_path)
        return _load_file(credentials_path, "path")

    if bundled_path and Path(bundled_path).is_file():
        log.info("credentials.loading", source="bundled", path=bundled_path)
        return _load_file(bundled_path, "bundled")

    log.info("credentials.loading", source="application_default")
    try:
        credentials, project_id = google.auth.default()
    except auth_exceptions.DefaultCredentialsError as e:
        raise ConfigurationError(NO_CREDENTIALS_HELP) from e
    return ResolvedCredentials(credentials, project_id, "application_default")


def resolve_project_id(resolved: ResolvedCredentials) -> str | None:
    """Project from the credentials, else from the environment, else None."""
    project_id = resolved.project_id
    if project_id:
        log.debug("credentials.project_id", project_id=project_id, origin="credentials")
        return project_id

    for name in PROJECT_ENV_VARS:
        project_id = os.environ.get(name, "").strip()
        if project_id:
            log.debug("credentials.project_id", project_id=project_id, origin=name)
            return project_id

    log.warning("credentials.project_id.unresolved", source=resolved.source)
    return None
