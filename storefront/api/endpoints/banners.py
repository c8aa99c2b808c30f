"""Banner endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import BannerCreate, BannerRead, BannerUpdate
from storefront.services.banners import BannerService

router = APIRouter(prefix="/banners", tags=["banners"])


@router.get("/", response_model=list[BannerRead])
def list_banners(db: Session = Depends(deps.get_db)):
    return BannerService(db).list_active()


@router.post("/", response_model=BannerRead, status_code=status.HTTP_201_CREATED)
def create_banner(
    payload: BannerCreate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return BannerService(db).create(payload)


@router.patch("/{banner_id}", response_model=BannerRead)
def update_banner(
    banner_id: int,
    payload: BannerUpdate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return BannerService(db).update(banner_id, payload)


@router.delete("/{banner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_banner(
    banner_id: int,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> Response:
    BannerService(db).delete(banner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
