"""Admin profile endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import ProfileUpdate, UserRead
from storefront.services.users import UserService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/me", response_model=UserRead)
def read_admin_profile(admin: User = Depends(deps.get_current_admin)) -> User:
    return admin


@router.patch("/me", response_model=UserRead)
def update_admin_profile(
    payload: ProfileUpdate,
    admin: User = Depends(deps.get_current_admin),
    db: Session = Depends(deps.get_db),
) -> User:
    return UserService(db).update_profile(admin, payload)


@router.get("/buyers", response_model=list[UserRead])
def list_buyers(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> list[User]:
    """Return buyer accounts, newest first."""

    return UserService(db).list_buyers(limit=limit, offset=offset)
