"""Recent activity feed."""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.models.content import Activity


class ActivityService:
    """Record and query storefront events.

    ``record`` only stages the row; the caller's commit persists it together
    with the change it describes.
    """

    def __init__(self, db: Session):
        self.db = db

    def record(self, kind: str, description: str, user_id: uuid.UUID | None = None) -> Activity:
        activity = Activity(user_id=user_id, kind=kind, description=description[:500])
        self.db.add(activity)
        return activity

    def recent(self, limit: int = 20) -> list[Activity]:
        stmt = select(Activity).order_by(Activity.created_at.desc()).limit(limit)
        return list(self.db.scalars(stmt))

    def recent_for_user(self, user_id: uuid.UUID, limit: int = 20) -> list[Activity]:
        stmt = (
            select(Activity)
            .where(Activity.user_id == user_id)
            .order_by(Activity.created_at.desc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt))
