"""Order and payment schemas."""
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

OrderStatus = Literal["pending", "confirmed", "shipped", "delivered", "cancelled"]


class OrderCreate(BaseModel):
    shipping_address: str = Field(min_length=5, max_length=1000)


class OrderItemRead(BaseModel):
    product_id: Optional[uuid.UUID] = None
    product_name: str
    unit_price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    status: str
    total: Decimal
    shipping_address: str
    payment_status: str
    items: List[OrderItemRead]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class PaymentConfirm(BaseModel):
    provider: str = Field(min_length=1, max_length=50)
    reference: str = Field(min_length=1, max_length=255)


class PaymentStatusRead(BaseModel):
    order_id: uuid.UUID
    payment_status: str
    provider: Optional[str] = None
    reference: Optional[str] = None
    amount: Decimal
    paid_at: Optional[datetime] = None
