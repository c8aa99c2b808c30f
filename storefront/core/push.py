"""Web Push (VAPID) configuration and client."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from loguru import logger
from pywebpush import webpush

from storefront.config import Settings


class PushConfigurationError(RuntimeError):
    """Raised at startup when required VAPID credentials are missing."""


@dataclass(frozen=True)
class PushConfig:
    """VAPID identity used to authenticate against push services."""

    subject: str
    public_key: str
    private_key: str

    @property
    def vapid_claims(self) -> Dict[str, str]:
        return {"sub": self.subject}


class PushClient:
    """Sends Web Push messages with a fixed VAPID identity."""

    def __init__(self, config: PushConfig) -> None:
        self.config = config

    @property
    def public_key(self) -> str:
        return self.config.public_key

    def send(self, subscription_info: Dict[str, Any], payload: Dict[str, Any]) -> None:
        """Deliver ``payload`` to a single subscription.

        ``pywebpush.WebPushException`` propagates so callers can prune
        expired subscriptions.
        """

        webpush(
            subscription_info=subscription_info,
            data=json.dumps(payload),
            vapid_private_key=self.config.private_key,
            # pywebpush mutates the claims dict (adds aud/exp).
            vapid_claims=dict(self.config.vapid_claims),
        )


def configure_push(settings: Settings, required: bool | None = None) -> PushClient | None:
    """Build the process-wide push client from settings.

    Missing credentials raise ``PushConfigurationError`` when push is
    required, otherwise push dispatch is disabled and ``None`` is returned.
    """

    if required is None:
        required = settings.PUSH_REQUIRED

    values = {
        "VAPID_SUBJECT": settings.VAPID_SUBJECT,
        "VAPID_PUBLIC_KEY": settings.VAPID_PUBLIC_KEY,
        "VAPID_PRIVATE_KEY": settings.VAPID_PRIVATE_KEY,
    }
    missing = [name for name, value in values.items() if not value]
    if missing:
        if required:
            raise PushConfigurationError(
                f"Missing push credentials: {', '.join(missing)}"
            )
        logger.warning("Push notifications disabled", missing=missing)
        return None

    client = PushClient(
        PushConfig(
            subject=values["VAPID_SUBJECT"],
            public_key=values["VAPID_PUBLIC_KEY"],
            private_key=values["VAPID_PRIVATE_KEY"],
        )
    )
    logger.info("Push notifications configured", subject=client.config.subject)
    return client
