"""Push subscription registration endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.connector import DatabaseConnector
from storefront.schemas import PushSubscriptionRequest, PushSubscriptionResult
from storefront.services.push_subscriptions import PushSubscriptionService
from storefront.utils.exceptions import DatabaseUnavailableError

router = APIRouter(tags=["notifications"])

SAVE_FAILED_MESSAGE = "Error saving subscription"


@router.post(
    "/push-subscription",
    response_model=PushSubscriptionResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def register_push_subscription(
    payload: PushSubscriptionRequest,
    token: str = Depends(deps.require_token),
    db: Session = Depends(deps.get_db),
    connector: DatabaseConnector = Depends(deps.get_database_connector),
):
    """Create or replace the caller's push subscription.

    A missing or unverifiable token is rejected with 401 before storage is
    consulted. Storage failures, including a database that never connected,
    are logged in full but reported to the client only as a generic message.
    """

    user_id = deps.token_subject(token)
    if user_id is None:
        raise deps.credentials_exception()

    try:
        if connector.is_failed:
            raise DatabaseUnavailableError(connector.state.reason or "Database is unavailable")
        user = deps.load_active_user(db, user_id)
        if user is not None:
            PushSubscriptionService(db).upsert(user.id, payload.subscription)
    except (SQLAlchemyError, DatabaseUnavailableError) as exc:
        db.rollback()
        logger.opt(exception=exc).error("Error saving push subscription", user_id=str(user_id))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": SAVE_FAILED_MESSAGE},
        )

    if user is None:
        raise deps.credentials_exception()
    return PushSubscriptionResult(success=True)
