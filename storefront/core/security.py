"""Password hashing and signed bearer tokens."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from storefront.config import settings

ALGORITHM = "HS256"


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class InvalidTokenError(Exception):
    """Token is malformed, expired or of the wrong kind."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def _default_lifetime(token_type: TokenType) -> timedelta:
    if token_type is TokenType.ACCESS:
        return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)


def issue_token(subject: Any, token_type: TokenType, lifetime: timedelta | None = None) -> str:
    """Sign a token for ``subject`` (usually a user id)."""

    issued_at = datetime.now(timezone.utc)
    claims: Dict[str, Any] = {
        "sub": str(subject),
        "type": token_type.value,
        "iat": issued_at,
        "exp": issued_at + (lifetime or _default_lifetime(token_type)),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(subject: Any) -> str:
    return issue_token(subject, TokenType.ACCESS)


def create_refresh_token(subject: Any) -> str:
    return issue_token(subject, TokenType.REFRESH)


def decode_token(token: str, expected_type: TokenType | str | None = None) -> Dict[str, Any]:
    """Verify ``token`` and return its claims.

    Raises ``InvalidTokenError`` for bad signatures, expired tokens and, when
    ``expected_type`` is given, tokens of another type.
    """

    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    if expected_type is not None and claims.get("type") != TokenType(expected_type).value:
        raise InvalidTokenError(f"Expected a {TokenType(expected_type).value} token")
    return claims
