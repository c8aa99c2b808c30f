"""Authentication service layer."""
from __future__ import annotations

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.core.security import (
    InvalidTokenError,
    TokenType,
    check_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
)
from storefront.db.models.user import ROLE_BUYER, User
from storefront.schemas import Token, TokenPayload, UserCreate
from storefront.services.activity import ActivityService
from storefront.utils.exceptions import AuthenticationError, BadRequestError


class EmailAlreadyExistsError(BadRequestError):
    """Raised when attempting to register with an email that already exists."""


class InvalidCredentialsError(AuthenticationError):
    """Raised when authentication credentials are invalid."""


class AuthService:
    """Encapsulates registration, login and token refresh."""

    def __init__(self, db: Session):
        self.db = db

    def register_user(self, payload: UserCreate, role: str = ROLE_BUYER) -> User:
        """Create a new account in the database."""

        existing_user = self.db.scalar(select(User).where(User.email == payload.email))
        if existing_user:
            raise EmailAlreadyExistsError("A user with this email already exists.")

        user = User(
            email=payload.email,
            hashed_password=hash_password(payload.password),
            full_name=payload.full_name,
            phone=payload.phone,
            role=role,
        )
        self.db.add(user)
        try:
            self.db.flush()
            ActivityService(self.db).record(
                "user_registered", f"{user.email} joined the store", user_id=user.id
            )
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise EmailAlreadyExistsError("A user with this email already exists.") from exc
        self.db.refresh(user)
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        """Validate credentials and return the associated user."""

        user = self.db.scalar(select(User).where(User.email == email))
        if not user or not check_password(password, user.hashed_password):
            raise InvalidCredentialsError("Incorrect email or password")
        if not user.is_active:
            raise InvalidCredentialsError("Account is disabled")
        return user

    def create_tokens(self, user: User) -> Token:
        """Generate access and refresh tokens for a user."""

        return Token(
            access_token=create_access_token(user.id),
            refresh_token=create_refresh_token(user.id),
        )

    def refresh_tokens(self, refresh_token: str) -> Token:
        """Exchange a valid refresh token for a new token pair."""

        try:
            payload = decode_token(refresh_token, expected_type=TokenType.REFRESH)
            token_data = TokenPayload.model_validate(payload)
        except (InvalidTokenError, ValidationError) as exc:
            raise InvalidCredentialsError("Invalid refresh token") from exc

        user = self.db.get(User, token_data.sub)
        if not user or not user.is_active:
            raise InvalidCredentialsError("Invalid refresh token")
        return self.create_tokens(user)
