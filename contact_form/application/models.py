from __future__ import annotations

from pydantic import BaseModel


class MessageConfirmation(BaseModel):
    """Body returned by create, update and delete."""

    id: str
    message: str
