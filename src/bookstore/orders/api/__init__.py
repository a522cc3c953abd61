"""Orders API package."""

from bookstore.orders.api.routes import order_router

__all__ = ["order_router"]
