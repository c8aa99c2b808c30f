"""Push subscription schemas."""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class PushSubscriptionRequest(BaseModel):
    """Body of ``POST /push-subscription``.

    The subscription is kept opaque; only its presence is enforced.
    """

    subscription: Dict[str, Any] = Field(
        ..., description="PushSubscription JSON produced by the browser"
    )


class PushSubscriptionResult(BaseModel):
    success: bool
    error: str | None = None
