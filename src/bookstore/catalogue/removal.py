"""Book removal: command and handler.

Removing a book also drops the cart rows and comments that point at it.
Order items keep their title and price snapshots and are left untouched.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from bookstore.cart.cart_item import CartItem
from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.reviews.comment import Comment

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="Book")
class RemoveBook:
    book_id = Identifier(required=True)


@bookstore.command_handler(part_of=Book)
class RemoveBookHandler:
    @handle(RemoveBook)
    def remove_book(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)

        cart_repo = current_domain.repository_for(CartItem)
        cart_rows = cart_repo.for_book(book.id)
        for row in cart_rows:
            cart_repo._dao.delete(row)

        comment_repo = current_domain.repository_for(Comment)
        comments = comment_repo.for_book(book.id)
        for comment in comments:
            comment_repo._dao.delete(comment)

        repo._dao.delete(book)

        logger.info(
            "Book removed",
            book_id=str(command.book_id),
            cart_rows_removed=len(cart_rows),
            comments_removed=len(comments),
        )
