"""Bookstore-specific errors.

Field and rule violations use Protean's `ValidationError` (400) and missing
records Protean's `ObjectNotFoundError` (404). The classes below cover the
remaining cases of the error taxonomy.
"""

from protean.exceptions import ValidationError


class InsufficientStock(ValidationError):
    """A book does not hold enough stock for the requested quantity."""

    def __init__(self, book_id, title, available, requested):
        self.book_id = str(book_id)
        self.available = available
        self.requested = requested
        super().__init__(
            {"stock": [f"Insufficient stock for '{title}': {available} available, {requested} requested"]}
        )


class Unauthenticated(Exception):
    """No valid session accompanies the request."""

    def __init__(self, message="Not authenticated"):
        self.message = message
        super().__init__(message)


class InvalidSession(Unauthenticated):
    """The request carried a session token that can no longer be honoured."""

    def __init__(self, message="Invalid session"):
        super().__init__(message)


class Forbidden(Exception):
    """The authenticated user lacks the capability required for the operation."""

    def __init__(self, message="Access denied"):
        self.message = message
        super().__init__(message)


class DuplicateEmail(Exception):
    """Another account already uses this email address."""

    def __init__(self, email):
        self.email = email
        super().__init__(f"Email {email!r} is already registered")
