"""Buyer profile endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import ProfileUpdate, UserRead
from storefront.services.users import UserService

router = APIRouter(prefix="/buyers", tags=["buyers"])


@router.get("/me", response_model=UserRead)
def read_profile(current_user: User = Depends(deps.get_current_user)) -> User:
    return current_user


@router.patch("/me", response_model=UserRead)
def update_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> User:
    return UserService(db).update_profile(current_user, payload)
