"""Domain events for the Book aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from bookstore.domain import bookstore


@bookstore.event(part_of="Book")
class BookCreated:
    """A new title was added to the catalogue."""

    __version__ = 1

    book_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    price = Float(required=True)
    stock = Integer(required=True)
    created_at = DateTime(required=True)


@bookstore.event(part_of="Book")
class BookDetailsUpdated:
    """An administrator edited catalogue fields of a book."""

    __version__ = 1

    book_id = Identifier(required=True)
    changed_fields = Text()  # JSON array of field names


@bookstore.event(part_of="Book")
class StockDecremented:
    """Stock left the ledger, either for an order or a manual adjustment."""

    __version__ = 1

    book_id = Identifier(required=True)
    quantity = Integer(required=True)
    remaining = Integer(required=True)
    order_id = Identifier()


@bookstore.event(part_of="Book")
class StockRestored:
    """Stock returned to the ledger after an order was deleted."""

    __version__ = 1

    book_id = Identifier(required=True)
    quantity = Integer(required=True)
    remaining = Integer(required=True)
    order_id = Identifier()
