"""Book creation: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore


@bookstore.command(part_of="Book")
class CreateBook:
    title = String(required=True, max_length=255)
    author = String(required=True, max_length=255)
    price = Float(required=True)
    original_price = Float()
    category = String(max_length=100)
    language = String(max_length=50)
    stock = Integer(default=0)
    rating = Float()
    total_ratings = Integer()
    description = Text()
    image = String(max_length=500)
    featured = Boolean(default=False)
    new_arrival = Boolean(default=False)


@bookstore.command_handler(part_of=Book)
class CreateBookHandler:
    @handle(CreateBook)
    def create_book(self, command):
        book = Book.create(
            title=command.title,
            author=command.author,
            price=command.price,
            original_price=command.original_price,
            category=command.category,
            language=command.language,
            stock=command.stock,
            rating=command.rating,
            total_ratings=command.total_ratings,
            description=command.description,
            image=command.image,
            featured=command.featured,
            new_arrival=command.new_arrival,
        )
        current_domain.repository_for(Book).add(book)
        return str(book.id)
