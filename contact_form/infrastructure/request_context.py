"""Request-scoped correlation id for log entries.

The HTTP middleware sets the id at the start of each request and binds it,
along with the method and path, to every structlog entry emitted while the
request is being handled.
"""
from __future__ import annotations

import uuid
from typing import Any

import structlog

REQUEST_ID_HEADER = "X-Request-ID"


def _generate_id() -> str:
    return uuid.uuid4().hex[:12]


def set_request_id(request_id: str | None = None) -> str:
    """Bind the request ID to the log context, generating one when the caller sent none."""
    rid = request_id or _generate_id()
    structlog.contextvars.bind_contextvars(request_id=rid)
    return rid


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()


def bind_request_context(**context: Any) -> None:
    """Bind key-value pairs to every subsequent log entry of this request.

    Example:
        bind_request_context(message_id="abc123")
    """
    structlog.contextvars.bind_contextvars(**context)
