"""Product endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import ProductCreate, ProductListResponse, ProductRead, ProductUpdate
from storefront.services.catalog import CatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=ProductListResponse)
def list_products(
    category_id: int | None = Query(None),
    q: str | None = Query(None, max_length=100),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(deps.get_db),
) -> ProductListResponse:
    """Browse active products, optionally filtered by category or search text."""

    items, total = CatalogService(db).list_products(
        category_id=category_id, query=q, limit=limit, offset=offset
    )
    return ProductListResponse(
        items=[ProductRead.model_validate(item) for item in items],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{product_id}", response_model=ProductRead)
def read_product(product_id: uuid.UUID, db: Session = Depends(deps.get_db)):
    return CatalogService(db).get_product(product_id)


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    db: Session = Depends(deps.get_db),
    admin: User = Depends(deps.get_current_admin),
):
    return CatalogService(db).create_product(payload, created_by=admin.id)


@router.patch("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return CatalogService(db).update_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: uuid.UUID,
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
) -> Response:
    CatalogService(db).deactivate_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
