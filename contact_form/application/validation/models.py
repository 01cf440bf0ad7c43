from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 180
MESSAGE_MAX_LENGTH = 2000


class MessageRequest(BaseModel):
    """Fields submitted through the contact form, for both create and update."""

    name: str = Field(
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Sender's name",
        examples=["Ana"],
    )
    email: str = Field(
        min_length=1,
        max_length=EMAIL_MAX_LENGTH,
        description="Sender's email address",
        examples=["ana@example.com"],
    )
    message: str = Field(
        min_length=1,
        max_length=MESSAGE_MAX_LENGTH,
        description="Message body",
        examples=["Olá"],
    )

    @field_validator("name", "email", "message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        # Display-name forms such as "Ana <ana@example.com>" are rejected
        try:
            result = validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"invalid email address: {e}") from e
        return result.normalized
