"""Catalogue API package."""

from bookstore.catalogue.api.routes import book_router

__all__ = ["book_router"]
