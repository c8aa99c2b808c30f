"""Cart endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import CartItemAdd, CartItemUpdate, CartRead
from storefront.services.cart import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("/", response_model=CartRead)
def read_cart(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> CartRead:
    return CartService(db).summary(current_user.id)


@router.post("/items", response_model=CartRead)
def add_cart_item(
    payload: CartItemAdd,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> CartRead:
    return CartService(db).add_item(current_user.id, payload.product_id, payload.quantity)


@router.patch("/items/{product_id}", response_model=CartRead)
def update_cart_item(
    product_id: uuid.UUID,
    payload: CartItemUpdate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> CartRead:
    return CartService(db).set_quantity(current_user.id, product_id, payload.quantity)


@router.delete("/items/{product_id}", response_model=CartRead)
def remove_cart_item(
    product_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> CartRead:
    return CartService(db).remove_item(current_user.id, product_id)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> Response:
    CartService(db).clear(current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
