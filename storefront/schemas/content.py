"""Banner and activity feed schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BannerCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    image_url: str = Field(min_length=1, max_length=512)
    link_url: Optional[str] = Field(default=None, max_length=512)
    position: int = 0
    is_active: bool = True


class BannerUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    image_url: Optional[str] = Field(default=None, min_length=1, max_length=512)
    link_url: Optional[str] = Field(default=None, max_length=512)
    position: Optional[int] = None
    is_active: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")


class BannerRead(BaseModel):
    id: int
    title: str
    image_url: str
    link_url: Optional[str] = None
    position: int
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class ActivityRead(BaseModel):
    id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    kind: str
    description: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
