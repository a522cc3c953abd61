"""HTTP plumbing shared by every bookstore router."""

from bookstore.api.errors import register_error_handlers

__all__ = ["register_error_handlers"]
