"""Ordered route mounting."""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from fastapi import APIRouter, Depends, FastAPI

from storefront.api.deps import require_database
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

RouteMount = Tuple[str, APIRouter]

# Mount order is part of the public contract; keep domain routes first.
DOMAIN_ROUTERS: Sequence[RouteMount] = (
    ("auth", auth.router),
    ("buyers", buyers.router),
    ("categories", categories.router),
    ("products", products.router),
    ("cart", cart.router),
    ("wishlist", wishlist.router),
    ("orders", orders.router),
    ("payment", payment.router),
    ("notifications", notifications.router),
    ("chat", chat.router),
    ("admin", admin.router),
    ("push-subscription", push_subscription.router),
    ("recent", recent.router),
    ("banners", banners.router),
)

# Handles its own persistence failures with a dedicated response body.
_SELF_GUARDED = {"push-subscription"}


def mount_routes(
    app: FastAPI,
    api_prefix: str,
    *,
    realtime_enabled: bool,
    routers: Iterable[RouteMount] | None = None,
) -> list[str]:
    """Include every router in order and return the mounted names."""

    mounted: list[str] = []
    for name, router in routers if routers is not None else DOMAIN_ROUTERS:
        dependencies = [] if name in _SELF_GUARDED else [Depends(require_database)]
        app.include_router(router, prefix=api_prefix, dependencies=dependencies)
        mounted.append(name)
        if name == "chat" and realtime_enabled:
            app.include_router(chat.realtime_router, prefix=api_prefix)
            mounted.append("chat-realtime")

    app.include_router(health.router)
    mounted.append("health")
    return mounted
