"""Order endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import OrderCreate, OrderRead, OrderStatusUpdate
from storefront.services.orders import OrderNotifier, OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
def place_order(
    payload: OrderCreate,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    """Check out the current cart."""

    return OrderService(db).checkout(current_user, payload.shipping_address)


@router.get("/", response_model=list[OrderRead])
def list_my_orders(
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return OrderService(db).list_for_user(current_user.id)


@router.get("/all", response_model=list[OrderRead])
def list_all_orders(
    status_filter: str | None = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: Session = Depends(deps.get_db),
    _: User = Depends(deps.get_current_admin),
):
    return OrderService(db).list_all(status=status_filter, limit=limit, offset=offset)


@router.get("/{order_id}", response_model=OrderRead)
def read_order(
    order_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return OrderService(db).get_for_user(order_id, current_user)


@router.post("/{order_id}/cancel", response_model=OrderRead)
def cancel_order(
    order_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return OrderService(db).cancel(order_id, current_user)


@router.patch("/{order_id}/status", response_model=OrderRead)
def update_order_status(
    order_id: uuid.UUID,
    payload: OrderStatusUpdate,
    db: Session = Depends(deps.get_db),
    notifier: OrderNotifier = Depends(deps.get_order_notifier),
    _: User = Depends(deps.get_current_admin),
):
    return OrderService(db).update_status(order_id, payload.status, notifier=notifier)
