"""Payment bookkeeping for orders.

No payment provider is called from here; a confirmation from an external
checkout is recorded against the order.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.db.models.order import Order
from storefront.db.models.user import User
from storefront.schemas.order import PaymentConfirm, PaymentStatusRead
from storefront.services.activity import ActivityService
from storefront.services.orders import OrderService
from storefront.utils.exceptions import ConflictError


class PaymentService:
    def __init__(self, db: Session):
        self.db = db
        self.orders = OrderService(db)

    @staticmethod
    def to_status(order: Order) -> PaymentStatusRead:
        return PaymentStatusRead(
            order_id=order.id,
            payment_status=order.payment_status,
            provider=order.payment_provider,
            reference=order.payment_reference,
            amount=Decimal(order.total),
            paid_at=order.paid_at,
        )

    def status(self, order_id: uuid.UUID, user: User) -> PaymentStatusRead:
        return self.to_status(self.orders.get_for_user(order_id, user))

    def confirm(self, order_id: uuid.UUID, user: User, payload: PaymentConfirm) -> PaymentStatusRead:
        order = self.orders.get_for_user(order_id, user)
        if order.status == "cancelled":
            raise ConflictError("Cannot pay for a cancelled order")
        if order.payment_status == "paid":
            raise ConflictError("Order is already paid")

        order.payment_status = "paid"
        order.payment_provider = payload.provider
        order.payment_reference = payload.reference
        order.paid_at = datetime.now(timezone.utc)
        if order.status == "pending":
            order.status = "confirmed"
        ActivityService(self.db).record(
            "payment_confirmed", f"Payment received for order {order.id}", user_id=order.user_id
        )
        self.db.commit()
        self.db.refresh(order)
        return self.to_status(order)
