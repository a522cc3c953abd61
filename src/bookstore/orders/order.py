"""Order aggregate: a placed order, its line items and their price snapshots.

Title and price on each line are copied from the book when the order is
placed and never change afterwards, even if the book is edited or removed.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from bookstore.domain import bookstore
from bookstore.orders.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"


@bookstore.entity(part_of="Order")
class OrderItem:
    book_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return self.price * self.quantity


@bookstore.aggregate
class Order:
    user_id = Identifier(required=True)
    customer_name = String(max_length=100)
    total = Float(default=0.0, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address_id = Identifier(required=True)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, shipping_address_id, lines, customer_name=None):
        """Create a PENDING order.

        Args:
            user_id: The customer placing the order.
            shipping_address_id: Address row recorded for this order.
            lines: Iterable of (book, quantity) pairs. Title and price are
                   taken from the book.
            customer_name: Name printed on the order.
        """
        lines = list(lines)
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        items = [
            OrderItem(book_id=str(book.id), title=book.title, price=book.price, quantity=quantity)
            for book, quantity in lines
        ]
        order = cls(
            user_id=user_id,
            customer_name=customer_name,
            total=round(sum(item.line_total for item in items), 2),
            status=OrderStatus.PENDING.value,
            shipping_address_id=shipping_address_id,
            items=items,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                shipping_address_id=str(shipping_address_id),
                item_count=len(items),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    def change_status(self, status):
        try:
            target = OrderStatus(status)
        except ValueError:
            raise ValidationError(
                {"status": [f"Unknown status {status!r}; expected one of {[s.value for s in OrderStatus]}"]}
            ) from None

        previous = self.status
        self.status = target.value
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
            )
        )

    def clear_items(self):
        """Detach every line item. Used before the order itself is deleted."""
        items = list(self.items)
        if items:
            self.remove_items(items)
        return items
