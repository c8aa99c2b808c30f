"""Cart and wishlist schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.catalog import ProductRead


class CartItemAdd(BaseModel):
    product_id: uuid.UUID
    quantity: int = Field(default=1, ge=1, le=100)


class CartItemUpdate(BaseModel):
    quantity: int = Field(ge=1, le=100)


class CartItemRead(BaseModel):
    product: ProductRead
    quantity: int
    line_total: Decimal


class CartRead(BaseModel):
    items: List[CartItemRead]
    total: Decimal
    item_count: int


class WishlistAdd(BaseModel):
    product_id: uuid.UUID


class WishlistItemRead(BaseModel):
    product: ProductRead
    added_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
