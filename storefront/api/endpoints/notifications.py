"""Notification endpoints."""
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.core.push import PushClient
from storefront.db.models.user import User
from storefront.schemas import NotificationRead
from storefront.services.notification_service import NotificationService
from storefront.utils.exceptions import ServiceUnavailableError

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/vapid-public-key")
def get_vapid_public_key(push_client: PushClient | None = Depends(deps.get_push_client)):
    if push_client is None:
        raise ServiceUnavailableError("Push notifications are not configured")
    return {"publicKey": push_client.public_key}


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    return NotificationService(db).list_for_user(current_user.id)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: uuid.UUID,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    return NotificationService(db).mark_read(current_user.id, notification_id)


@router.post("/test")
def test_notification(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    push_client: PushClient | None = Depends(deps.get_push_client),
):
    service = NotificationService(db, push_client)
    delivered = service.push(
        current_user.id, {"title": "Success!", "body": "This is a test notification from the store."}
    )
    return {"status": "sent" if delivered else "not_delivered"}
