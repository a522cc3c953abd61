"""Book aggregate: catalogue entry and stock ledger."""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from bookstore.catalogue.events import (
    BookCreated,
    BookDetailsUpdated,
    StockDecremented,
    StockRestored,
)
from bookstore.domain import bookstore
from bookstore.errors import InsufficientStock

# Fields an administrator may change through `update_details`
EDITABLE_FIELDS = (
    "title",
    "author",
    "price",
    "original_price",
    "category",
    "language",
    "stock",
    "rating",
    "total_ratings",
    "description",
    "image",
    "featured",
    "new_arrival",
)


@bookstore.aggregate
class Book:
    """A title offered for sale.

    `stock` is the single source of truth for available inventory. It only
    moves through `decrement_stock` (orders, manual adjustments) and
    `restore_stock` (order deletion), apart from explicit admin edits.
    """

    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    category = String(max_length=100)
    language = String(max_length=50)
    stock = Integer(default=0, min_value=0)
    rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    total_ratings = Integer(default=0, min_value=0)
    description = Text()
    image = String(max_length=500)
    featured = Boolean(default=False)
    new_arrival = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def title_and_author_must_not_be_blank(self):
        if not (self.title or "").strip():
            raise ValidationError({"title": ["Title must not be blank"]})
        if not (self.author or "").strip():
            raise ValidationError({"author": ["Author must not be blank"]})

    @classmethod
    def create(cls, title, author, price, **details):
        now = datetime.now(UTC)
        book = cls(
            title=title,
            author=author,
            price=price,
            created_at=now,
            updated_at=now,
            **{key: value for key, value in details.items() if value is not None},
        )
        book.raise_(
            BookCreated(
                book_id=str(book.id),
                title=book.title,
                author=book.author,
                price=book.price,
                stock=book.stock,
                created_at=now,
            )
        )
        return book

    def update_details(self, **changes):
        """Apply a partial update. Keys outside EDITABLE_FIELDS and None values are ignored."""
        applied = {key: value for key, value in changes.items() if key in EDITABLE_FIELDS and value is not None}
        for key, value in applied.items():
            setattr(self, key, value)

        self.updated_at = datetime.now(UTC)
        self.raise_(
            BookDetailsUpdated(
                book_id=str(self.id),
                changed_fields=json.dumps(sorted(applied)),
            )
        )

    def has_stock_for(self, quantity):
        return self.stock >= quantity

    def ensure_stock_for(self, quantity):
        if not self.has_stock_for(quantity):
            raise InsufficientStock(self.id, self.title, self.stock, quantity)

    def decrement_stock(self, quantity, order_id=None):
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self.ensure_stock_for(quantity)

        self.stock = self.stock - quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockDecremented(
                book_id=str(self.id),
                quantity=quantity,
                remaining=self.stock,
                order_id=str(order_id) if order_id else None,
            )
        )

    def restore_stock(self, quantity, order_id=None):
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        self.stock = self.stock + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockRestored(
                book_id=str(self.id),
                quantity=quantity,
                remaining=self.stock,
                order_id=str(order_id) if order_id else None,
            )
        )
