"""Domain events for cart rows."""

from protean.fields import Identifier, Integer

from bookstore.domain import bookstore


@bookstore.event(part_of="CartItem")
class CartItemAdded:
    """A book was put in a user's cart, or its quantity was topped up."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity_added = Integer(required=True)
    quantity = Integer(required=True)


@bookstore.event(part_of="CartItem")
class CartQuantityChanged:
    """The quantity of a cart row was set directly."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
