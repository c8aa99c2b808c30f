"""Service layer for account profiles."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.models.user import ROLE_BUYER, User
from storefront.schemas.user import ProfileUpdate


class UserService:
    """Profile reads and updates shared by buyer and admin routes."""

    def __init__(self, db: Session):
        self.db = db

    def update_profile(self, user: User, payload: ProfileUpdate) -> User:
        """Persist profile changes and return the updated entity."""

        update_data = payload.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(user, field, value)

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def list_buyers(self, limit: int = 50, offset: int = 0) -> list[User]:
        """Return paginated buyers, newest first."""

        stmt = (
            select(User)
            .where(User.role == ROLE_BUYER)
            .order_by(User.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.scalars(stmt))
