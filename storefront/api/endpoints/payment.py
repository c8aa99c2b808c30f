"""Payment status endpoints."""
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api import deps
from storefront.db.models.user import User
from storefront.schemas import PaymentConfirm, PaymentStatusRead
from storefront.services.payments import PaymentService

router = APIRouter(prefix="/payment", tags=["payment"])


@router.get("/{order_id}", response_model=PaymentStatusRead)
def read_payment_status(
    order_id: uuid.UUID,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> PaymentStatusRead:
    return PaymentService(db).status(order_id, current_user)


@router.post("/{order_id}/confirm", response_model=PaymentStatusRead)
def confirm_payment(
    order_id: uuid.UUID,
    payload: PaymentConfirm,
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
) -> PaymentStatusRead:
    """Record a payment completed with an external provider."""

    return PaymentService(db).confirm(order_id, current_user, payload)
