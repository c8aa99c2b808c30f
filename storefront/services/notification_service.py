"""Service for in-app notifications and Web Push delivery."""
from __future__ import annotations

import uuid

from loguru import logger
from pywebpush import WebPushException
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.core.push import PushClient
from storefront.db.models.notification import Notification
from storefront.services.push_subscriptions import PushSubscriptionService
from storefront.utils.exceptions import NotFoundError

EXPIRED_SUBSCRIPTION_STATUSES = (404, 410)


class NotificationService:
    def __init__(self, db: Session, push_client: PushClient | None = None):
        self.db = db
        self.push_client = push_client

    def notify(
        self,
        user_id: uuid.UUID,
        title: str,
        body: str,
        url: str | None = None,
    ) -> Notification:
        """Store an in-app notification and push it to the user's device."""

        notification = Notification(user_id=user_id, title=title, body=body, url=url)
        self.db.add(notification)
        self.db.commit()
        self.push(user_id, {"title": title, "body": body, "url": url})
        return notification

    def push(self, user_id: uuid.UUID, payload: dict) -> bool:
        """Send ``payload`` to the stored subscription; returns delivery success."""

        if self.push_client is None:
            logger.info("Push disabled, skipping delivery", user_id=str(user_id))
            return False

        subscriptions = PushSubscriptionService(self.db)
        record = subscriptions.get_for_user(user_id)
        if record is None:
            return False

        try:
            self.push_client.send(record.subscription, payload)
        except WebPushException as ex:
            status_code = ex.response.status_code if ex.response is not None else None
            if status_code in EXPIRED_SUBSCRIPTION_STATUSES:
                logger.info("Removing expired push subscription", user_id=str(user_id))
                subscriptions.delete_for_user(user_id)
            else:
                logger.error("WebPush failed", user_id=str(user_id), error=str(ex))
            return False
        return True

    def list_for_user(self, user_id: uuid.UUID, limit: int = 50) -> list[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
            .limit(limit)
        )
        return list(self.db.scalars(stmt))

    def mark_read(self, user_id: uuid.UUID, notification_id: uuid.UUID) -> Notification:
        notification = self.db.get(Notification, notification_id)
        if notification is None or notification.user_id != user_id:
            raise NotFoundError("Notification not found")
        notification.is_read = True
        self.db.commit()
        return notification
