"""Identity API package."""

from bookstore.identity.api.routes import auth_router, user_router

__all__ = ["auth_router", "user_router"]
