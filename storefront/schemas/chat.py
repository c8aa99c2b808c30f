"""Chat schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessageCreate(BaseModel):
    recipient_id: uuid.UUID
    content: str = Field(min_length=1, max_length=4000)


class ChatMessageRead(BaseModel):
    id: uuid.UUID
    sender_id: uuid.UUID
    recipient_id: uuid.UUID
    content: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
