"""Reviews API package."""

from bookstore.reviews.api.routes import comment_router

__all__ = ["comment_router"]
