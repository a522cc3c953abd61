"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bookstore.domain import bookstore


@bookstore.event(part_of="Order")
class OrderPlaced:
    """An order was created and its stock taken from the ledger."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    shipping_address_id = Identifier(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)


@bookstore.event(part_of="Order")
class OrderStatusChanged:
    """An administrator moved an order to another status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
