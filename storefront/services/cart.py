"""Cart and wishlist services."""
from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.db.models.cart import CartItem, WishlistItem
from storefront.schemas.cart import CartItemRead, CartRead
from storefront.schemas.catalog import ProductRead
from storefront.services.catalog import CatalogService
from storefront.utils.exceptions import BadRequestError, NotFoundError


class CartService:
    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)

    def items(self, user_id: uuid.UUID) -> list[CartItem]:
        stmt = select(CartItem).where(CartItem.user_id == user_id).order_by(CartItem.added_at)
        return list(self.db.scalars(stmt).unique())

    def summary(self, user_id: uuid.UUID) -> CartRead:
        lines = []
        total = Decimal("0.00")
        for item in self.items(user_id):
            line_total = Decimal(item.product.price) * item.quantity
            total += line_total
            lines.append(
                CartItemRead(
                    product=ProductRead.model_validate(item.product),
                    quantity=item.quantity,
                    line_total=line_total,
                )
            )
        return CartRead(
            items=lines,
            total=total,
            item_count=sum(line.quantity for line in lines),
        )

    def _get_item(self, user_id: uuid.UUID, product_id: uuid.UUID) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.user_id == user_id, CartItem.product_id == product_id
        )
        return self.db.scalars(stmt).first()

    def add_item(self, user_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> CartRead:
        """Add ``quantity`` of a product, incrementing an existing line."""

        product = self.catalog.get_product(product_id)
        item = self._get_item(user_id, product_id)
        new_quantity = quantity + (item.quantity if item else 0)
        if new_quantity > product.stock:
            raise BadRequestError(
                "Insufficient stock", details={"available": product.stock}
            )
        if item is None:
            item = CartItem(user_id=user_id, product_id=product_id, quantity=new_quantity)
            self.db.add(item)
        else:
            item.quantity = new_quantity
        self.db.commit()
        return self.summary(user_id)

    def set_quantity(self, user_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> CartRead:
        item = self._get_item(user_id, product_id)
        if item is None:
            raise NotFoundError("Product is not in the cart")
        if quantity > item.product.stock:
            raise BadRequestError(
                "Insufficient stock", details={"available": item.product.stock}
            )
        item.quantity = quantity
        self.db.commit()
        return self.summary(user_id)

    def remove_item(self, user_id: uuid.UUID, product_id: uuid.UUID) -> CartRead:
        item = self._get_item(user_id, product_id)
        if item is None:
            raise NotFoundError("Product is not in the cart")
        self.db.delete(item)
        self.db.commit()
        return self.summary(user_id)

    def clear(self, user_id: uuid.UUID, *, commit: bool = True) -> None:
        self.db.execute(delete(CartItem).where(CartItem.user_id == user_id))
        if commit:
            self.db.commit()


class WishlistService:
    def __init__(self, db: Session):
        self.db = db
        self.catalog = CatalogService(db)

    def items(self, user_id: uuid.UUID) -> list[WishlistItem]:
        stmt = (
            select(WishlistItem)
            .where(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.added_at.desc())
        )
        return list(self.db.scalars(stmt).unique())

    def add(self, user_id: uuid.UUID, product_id: uuid.UUID) -> WishlistItem:
        """Add a product; adding it twice returns the existing entry."""

        self.catalog.get_product(product_id)
        stmt = select(WishlistItem).where(
            WishlistItem.user_id == user_id, WishlistItem.product_id == product_id
        )
        existing = self.db.scalars(stmt).first()
        if existing is not None:
            return existing
        item = WishlistItem(user_id=user_id, product_id=product_id)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def remove(self, user_id: uuid.UUID, product_id: uuid.UUID) -> None:
        result = self.db.execute(
            delete(WishlistItem).where(
                WishlistItem.user_id == user_id, WishlistItem.product_id == product_id
            )
        )
        if not result.rowcount:
            raise NotFoundError("Product is not in the wishlist")
        self.db.commit()
