"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from bookstore.domain import bookstore


@bookstore.event(part_of="User")
class UserRegistered:
    """A visitor created an account."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    name = String(required=True, max_length=100)
    registered_at = DateTime(required=True)


@bookstore.event(part_of="User")
class UserProfileUpdated:
    """A user changed their own name, phone or location."""

    __version__ = 1

    user_id = Identifier(required=True)
    name = String(max_length=100)
    phone = String(max_length=30)
    location = String(max_length=255)


@bookstore.event(part_of="User")
class UserAccountUpdated:
    """An administrator edited a user account."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(max_length=254)
    role = String(max_length=10)
