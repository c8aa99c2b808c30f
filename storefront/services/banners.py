"""Homepage banner management."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.models.content import Banner
from storefront.schemas.content import BannerCreate, BannerUpdate
from storefront.utils.exceptions import NotFoundError


class BannerService:
    def __init__(self, db: Session):
        self.db = db

    def list_active(self) -> list[Banner]:
        stmt = (
            select(Banner)
            .where(Banner.is_active.is_(True))
            .order_by(Banner.position, Banner.id)
        )
        return list(self.db.scalars(stmt))

    def get(self, banner_id: int) -> Banner:
        banner = self.db.get(Banner, banner_id)
        if banner is None:
            raise NotFoundError("Banner not found")
        return banner

    def create(self, payload: BannerCreate) -> Banner:
        banner = Banner(**payload.model_dump())
        self.db.add(banner)
        self.db.commit()
        self.db.refresh(banner)
        return banner

    def update(self, banner_id: int, payload: BannerUpdate) -> Banner:
        banner = self.get(banner_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(banner, field, value)
        self.db.commit()
        self.db.refresh(banner)
        return banner

    def delete(self, banner_id: int) -> None:
        self.db.delete(self.get(banner_id))
        self.db.commit()
