"""Book detail updates: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.book import EDITABLE_FIELDS, Book
from bookstore.domain import bookstore


@bookstore.command(part_of="Book")
class UpdateBook:
    """Partial update; fields left empty keep their current value."""

    book_id = Identifier(required=True)
    title = String(max_length=255)
    author = String(max_length=255)
    price = Float()
    original_price = Float()
    category = String(max_length=100)
    language = String(max_length=50)
    stock = Integer()
    rating = Float()
    total_ratings = Integer()
    description = Text()
    image = String(max_length=500)
    featured = Boolean()
    new_arrival = Boolean()


@bookstore.command_handler(part_of=Book)
class UpdateBookHandler:
    @handle(UpdateBook)
    def update_book(self, command):
        repo = current_domain.repository_for(Book)
        book = repo.get(command.book_id)
        book.update_details(**{name: getattr(command, name) for name in EDITABLE_FIELDS})
        repo.add(book)
