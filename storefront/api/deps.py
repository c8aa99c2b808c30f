"""Shared API dependencies."""
from __future__ import annotations

from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.core.push import PushClient
from storefront.core.security import InvalidTokenError, TokenType, decode_token
from storefront.db.connector import DatabaseConnector
from storefront.db.models.user import User
from storefront.db.session import get_db
from storefront.schemas import TokenPayload
from storefront.services.orders import OrderNotifier
from storefront.services.realtime import ChatConnectionManager
from storefront.tasks.notifications import enqueue_order_notification
from storefront.utils.exceptions import DatabaseUnavailableError, PermissionDeniedError

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/auth/login", auto_error=False)

__all__ = [
    "get_db",
    "get_current_user",
    "get_current_admin",
    "get_database_connector",
    "require_database",
    "get_push_client",
    "get_connection_manager",
    "get_order_notifier",
    "require_token",
    "resolve_user_from_token",
    "token_subject",
    "load_active_user",
]


def get_database_connector(request: Request) -> DatabaseConnector:
    return request.app.state.database


def require_database(connector: DatabaseConnector = Depends(get_database_connector)) -> None:
    """Reject requests once the startup connection attempt has failed.

    A pending connection is let through; the handler then succeeds or fails
    on its own.
    """

    if connector.is_failed:
        raise DatabaseUnavailableError("Database is unavailable")


def credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_token(token: str | None = Depends(oauth2_scheme)) -> str:
    if not token:
        raise credentials_exception()
    return token


def token_subject(token: str) -> UUID | None:
    """Return the user id carried by a valid access token, without touching the database."""

    try:
        payload = decode_token(token, expected_type=TokenType.ACCESS)
        return TokenPayload.model_validate(payload).sub
    except (InvalidTokenError, ValidationError, ValueError, KeyError):
        return None


def load_active_user(db: Session, user_id: UUID) -> User | None:
    user = db.get(User, user_id)
    if user is None or not user.is_active:
        return None
    return user


def resolve_user_from_token(token: str, db: Session) -> User | None:
    user_id = token_subject(token)
    if user_id is None:
        return None
    return load_active_user(db, user_id)


def get_current_user(token: str = Depends(require_token), db: Session = Depends(get_db)) -> User:
    """Resolve the authenticated user from the Authorization header."""

    try:
        user = resolve_user_from_token(token, db)
    except SQLAlchemyError as exc:
        raise DatabaseUnavailableError("Database is unavailable") from exc
    if user is None:
        raise credentials_exception()
    return user


def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_admin:
        raise PermissionDeniedError("Admin access required")
    return current_user


def get_push_client(request: Request) -> PushClient | None:
    """Return the push client configured once at startup (``None`` if disabled)."""

    return request.app.state.push


def get_connection_manager(request: Request) -> ChatConnectionManager | None:
    """Realtime manager, or ``None`` when the realtime channel is off."""

    return getattr(request.app.state, "realtime", None)


def get_order_notifier() -> OrderNotifier:
    return enqueue_order_notification
