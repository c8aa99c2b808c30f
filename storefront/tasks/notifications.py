"""Celery tasks for push notification dispatch."""
from __future__ import annotations

import uuid

from loguru import logger

from storefront.celery_app import celery_app
from storefront.config import settings
from storefront.core.push import configure_push
from storefront.db.session import SessionLocal
from storefront.services.notification_service import NotificationService


@celery_app.task(name="storefront.tasks.notifications.dispatch_notification")
def dispatch_notification(
    user_id: str, title: str, body: str, url: str | None = None
) -> dict[str, object]:
    """Store and push a notification outside the request cycle."""

    db = SessionLocal()
    try:
        # Workers degrade to in-app only when push is not configured.
        service = NotificationService(db, push_client=configure_push(settings, required=False))
        notification = service.notify(uuid.UUID(user_id), title, body, url)
        logger.info("Notification dispatched", user_id=user_id, notification_id=str(notification.id))
        return {"user_id": user_id, "notification_id": str(notification.id)}
    finally:
        db.close()


def enqueue_order_notification(
    user_id: uuid.UUID, title: str, body: str, url: str | None = None
) -> None:
    """Order notifier that hands the notification to the Celery worker."""

    dispatch_notification.delay(str(user_id), title, body, url)
