"""Category endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.services.catalog import CatalogService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=list[CategoryRead])
def list_categories(db: Session = Depends(deps.get_db)):
    return CatalogService(db).list_categories()


@router.get("/{category_id}", response_model=CategoryRead)
def read_category(category_id: int, db: Session = Depends(deps.get_db)):
    return CatalogService(db).get_category(category_id)


@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return CatalogService(db).create_category(payload)


@router.patch("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return CatalogService(db).update_category(category_id, payload)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> Response:
    CatalogService(db).delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
