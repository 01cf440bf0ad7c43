"""Failures raised by the message repository and use cases."""
from __future__ import annotations


class ContactFormError(Exception):
    pass


class MessageNotFoundError(ContactFormError):
    def __init__(self, message_id: str) -> None:
        super().__init__(f"message {message_id} not found")
        self.message_id = message_id


class StorageError(ContactFormError):
    """The document store rejected or failed an operation.

    ``cause`` is the underlying error's message, kept so it can be reported
    back to the caller.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


class StorageInterruptedError(StorageError):
    """The call was cancelled before the store answered; safe to retry."""


class ConfigurationError(ContactFormError):
    """Credentials or client settings could not be resolved at startup."""
