"""Recent activity feeds."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import ActivityRead
from storefront.services.activity import ActivityService

router = APIRouter(prefix="/recent", tags=["recent"])


@router.get("/", response_model=list[ActivityRead])
def store_activity(
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return ActivityService(db).recent(limit=limit)


@router.get("/me", response_model=list[ActivityRead])
def my_activity(
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    return ActivityService(db).recent_for_user(current_user.id, limit=limit)
