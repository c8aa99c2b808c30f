"""Pydantic schemas package."""

from storefront.schemas.auth import RefreshRequest, Token, TokenPayload
from storefront.schemas.cart import (
    CartItemAdd,
    CartItemRead,
    CartItemUpdate,
    CartRead,
    WishlistAdd,
    WishlistItemRead,
)
from storefront.schemas.catalog import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    ProductCreate,
    ProductListResponse,
    ProductRead,
    ProductUpdate,
)
from storefront.schemas.chat import ChatMessageCreate, ChatMessageRead
from storefront.schemas.content import ActivityRead, BannerCreate, BannerRead, BannerUpdate
from storefront.schemas.health import HealthResponse
from storefront.schemas.notification import NotificationRead
from storefront.schemas.order import (
    OrderCreate,
    OrderItemRead,
    OrderRead,
    OrderStatusUpdate,
    PaymentConfirm,
    PaymentStatusRead,
)
from storefront.schemas.push import PushSubscriptionRequest, PushSubscriptionResult
from storefront.schemas.user import ProfileUpdate, UserCreate, UserLogin, UserRead

__all__ = [
    "RefreshRequest",
    "Token",
    "TokenPayload",
    "CartItemAdd",
    "CartItemRead",
    "CartItemUpdate",
    "CartRead",
    "WishlistAdd",
    "WishlistItemRead",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "ProductCreate",
    "ProductListResponse",
    "ProductRead",
    "ProductUpdate",
    "ChatMessageCreate",
    "ChatMessageRead",
    "ActivityRead",
    "BannerCreate",
    "BannerRead",
    "BannerUpdate",
    "HealthResponse",
    "NotificationRead",
    "OrderCreate",
    "OrderItemRead",
    "OrderRead",
    "OrderStatusUpdate",
    "PaymentConfirm",
    "PaymentStatusRead",
    "PushSubscriptionRequest",
    "PushSubscriptionResult",
    "ProfileUpdate",
    "UserCreate",
    "UserLogin",
    "UserRead",
]
