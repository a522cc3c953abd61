"""Manual stock adjustment: command and handler.

Checkout decrements stock itself while placing the order. This command
serves administrators correcting the ledger by hand.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="Book")
class DecrementStock:
    book_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@bookstore.command_handler(part_of=Book)
class StockAdjustmentHandler:
    @handle(DecrementStock)
    def decrement_stock(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        book.decrement_stock(command.quantity)
        repo.add(book)

        logger.info(
            "Stock decremented manually",
            book_id=str(book.id),
            quantity=command.quantity,
            remaining=book.stock,
        )
        return book.stock
