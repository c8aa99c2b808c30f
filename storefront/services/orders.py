"""Order lifecycle: checkout, cancellation and status changes."""
from __future__ import annotations

import uuid
from decimal import Decimal
from typing import Callable

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.models.catalog import Product
from storefront.db.models.order import Order, OrderItem
from storefront.db.models.user import User
from storefront.services.activity import ActivityService
from storefront.services.cart import CartService
from storefront.utils.exceptions import BadRequestError, ConflictError, NotFoundError

# (user_id, title, body, url) -> None
OrderNotifier = Callable[[uuid.UUID, str, str, str | None], None]

ALLOWED_TRANSITIONS: dict[str, tuple[str, ...]] = {
    "pending": ("confirmed", "cancelled"),
    "confirmed": ("shipped", "cancelled"),
    "shipped": ("delivered",),
    "delivered": (),
    "cancelled": (),
}


class OrderService:
    def __init__(self, db: Session):
        self.db = db

    def checkout(self, user: User, shipping_address: str) -> Order:
        """Turn the user's cart into a pending order and reserve stock."""

        cart = CartService(self.db)
        items = cart.items(user.id)
        if not items:
            raise BadRequestError("Cart is empty")

        # Validate every line before touching stock.
        products = []
        for item in items:
            product = self.db.get(Product, item.product_id, with_for_update=True)
            if product is None or not product.is_active:
                raise BadRequestError("A product in the cart is no longer available")
            if item.quantity > product.stock:
                raise BadRequestError(
                    f"Insufficient stock for {product.name}",
                    details={"product_id": str(product.id), "available": product.stock},
                )
            products.append(product)

        order = Order(user_id=user.id, shipping_address=shipping_address, total=Decimal("0.00"))
        total = Decimal("0.00")
        for item, product in zip(items, products):
            product.stock -= item.quantity
            unit_price = Decimal(product.price)
            total += unit_price * item.quantity
            order.items.append(
                OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    unit_price=unit_price,
                    quantity=item.quantity,
                )
            )
        order.total = total
        self.db.add(order)
        cart.clear(user.id, commit=False)
        self.db.flush()
        ActivityService(self.db).record(
            "order_placed", f"Order {order.id} placed for {total}", user_id=user.id
        )
        self.db.commit()
        self.db.refresh(order)
        logger.info("Order placed", order_id=str(order.id), user_id=str(user.id))
        return order

    def list_for_user(self, user_id: uuid.UUID) -> list[Order]:
        stmt = select(Order).where(Order.user_id == user_id).order_by(Order.created_at.desc())
        return list(self.db.scalars(stmt))

    def list_all(self, status: str | None = None, limit: int = 50, offset: int = 0) -> list[Order]:
        stmt = select(Order)
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = stmt.order_by(Order.created_at.desc()).offset(offset).limit(limit)
        return list(self.db.scalars(stmt))

    def get_for_user(self, order_id: uuid.UUID, user: User) -> Order:
        """Return an order visible to ``user`` (its owner, or any admin)."""

        order = self.db.get(Order, order_id)
        if order is None or (order.user_id != user.id and not user.is_admin):
            raise NotFoundError("Order not found")
        return order

    def _restock(self, order: Order) -> None:
        for item in order.items:
            if item.product_id is None:
                continue
            product = self.db.get(Product, item.product_id)
            if product is not None:
                product.stock += item.quantity

    def cancel(self, order_id: uuid.UUID, user: User) -> Order:
        order = self.get_for_user(order_id, user)
        if order.status != "pending":
            raise ConflictError("Only pending orders can be cancelled")
        order.status = "cancelled"
        self._restock(order)
        ActivityService(self.db).record(
            "order_cancelled", f"Order {order.id} cancelled", user_id=order.user_id
        )
        self.db.commit()
        self.db.refresh(order)
        return order

    def update_status(
        self,
        order_id: uuid.UUID,
        status: str,
        notifier: OrderNotifier | None = None,
    ) -> Order:
        """Advance an order along ``ALLOWED_TRANSITIONS`` and notify the buyer."""

        order = self.db.get(Order, order_id)
        if order is None:
            raise NotFoundError("Order not found")
        if status == order.status:
            return order
        if status not in ALLOWED_TRANSITIONS.get(order.status, ()):
            raise ConflictError(f"Cannot change order status from {order.status} to {status}")

        order.status = status
        if status == "cancelled":
            self._restock(order)
        ActivityService(self.db).record(
            "order_status_changed", f"Order {order.id} is now {status}", user_id=order.user_id
        )
        self.db.commit()
        self.db.refresh(order)

        if notifier is not None:
            # The status change is already committed; delivery is best effort.
            try:
                notifier(
                    order.user_id,
                    "Order update",
                    f"Your order is now {status}.",
                    f"/orders/{order.id}",
                )
            except Exception as exc:
                logger.opt(exception=exc).error("Order notification failed", order_id=str(order.id))
        return order
