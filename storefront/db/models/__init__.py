"""Database models package."""
from storefront.db.models.user import User
from storefront.db.models.push_subscription import PushSubscription
from storefront.db.models.catalog import Category, Product
from storefront.db.models.cart import CartItem, WishlistItem
from storefront.db.models.order import Order, OrderItem
from storefront.db.models.notification import Notification
from storefront.db.models.chat import ChatMessage
from storefront.db.models.content import Activity, Banner

__all__ = [
    "User",
    "PushSubscription",
    "Category",
    "Product",
    "CartItem",
    "WishlistItem",
    "Order",
    "OrderItem",
    "Notification",
    "ChatMessage",
    "Activity",
    "Banner",
]
