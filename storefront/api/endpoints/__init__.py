"""API endpoint modules."""

from storefront.api.endpoints import (
    admin,
    auth,
    banners,
    buyers,
    cart,
    categories,
    chat,
    health,
    notifications,
    orders,
    payment,
    products,
    push_subscription,
    recent,
    wishlist,
)

__all__ = [
    "admin",
    "auth",
    "banners",
    "buyers",
    "cart",
    "categories",
    "chat",
    "health",
    "notifications",
    "orders",
    "payment",
    "products",
    "push_subscription",
    "recent",
    "wishlist",
]
