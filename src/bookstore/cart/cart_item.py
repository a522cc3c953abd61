"""CartItem aggregate: one (user, book) row of a shopping cart."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from bookstore.cart.events import CartItemAdded, CartQuantityChanged
from bookstore.domain import bookstore


@bookstore.aggregate
class CartItem:
    """A user holds at most one row per book; repeat adds grow its quantity."""

    user_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id, book_id, quantity):
        now = datetime.now(UTC)
        item = cls(
            user_id=str(user_id),
            book_id=str(book_id),
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            CartItemAdded(
                cart_item_id=str(item.id),
                user_id=item.user_id,
                book_id=item.book_id,
                quantity_added=quantity,
                quantity=quantity,
            )
        )
        return item

    def increase(self, quantity):
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        self.quantity = self.quantity + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemAdded(
                cart_item_id=str(self.id),
                user_id=str(self.user_id),
                book_id=str(self.book_id),
                quantity_added=quantity,
                quantity=self.quantity,
            )
        )

    def change_quantity(self, quantity):
        previous = self.quantity
        self.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartQuantityChanged(
                cart_item_id=str(self.id),
                previous_quantity=previous,
                new_quantity=quantity,
            )
        )
