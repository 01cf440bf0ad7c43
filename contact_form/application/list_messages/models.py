from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None
    email: str | None
    message: str | None
    created_at: datetime | None = Field(alias="createdAt")
