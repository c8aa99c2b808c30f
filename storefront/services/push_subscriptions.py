"""Push subscription persistence."""
from __future__ import annotations

import uuid
from typing import Any, Dict

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.db.models.push_subscription import PushSubscription


class PushSubscriptionService:
    """Keeps exactly one subscription per user."""

    def __init__(self, db: Session):
        self.db = db

    def get_for_user(self, user_id: uuid.UUID) -> PushSubscription | None:
        stmt = select(PushSubscription).where(PushSubscription.user_id == user_id)
        return self.db.scalars(stmt).first()

    def upsert(self, user_id: uuid.UUID, subscription: Dict[str, Any]) -> PushSubscription:
        """Create the user's subscription or overwrite the existing one."""

        record = self.get_for_user(user_id)
        if record is not None:
            record.subscription = subscription
            self.db.commit()
            return record

        record = PushSubscription(user_id=user_id, subscription=subscription)
        self.db.add(record)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration inserted first; overwrite it instead.
            self.db.rollback()
            record = self.get_for_user(user_id)
            if record is None:
                raise
            record.subscription = subscription
            self.db.commit()
        return record

    def delete_for_user(self, user_id: uuid.UUID) -> None:
        record = self.get_for_user(user_id)
        if record is not None:
            self.db.delete(record)
            self.db.commit()
