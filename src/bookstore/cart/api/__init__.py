"""Cart API package."""

from bookstore.cart.api.routes import cart_router

__all__ = ["cart_router"]
