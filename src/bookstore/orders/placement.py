"""Order placement: command and handler.

Placement validates every line against the stock ledger before writing
anything, then decrements stock, records the shipping address and creates the
order inside the handler's unit of work. A failure on any line leaves every
book, address and order untouched.
"""

import json
from collections import OrderedDict

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.orders.order import Order
from bookstore.orders.shipping_address import ShippingAddress

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    customer_name = String(max_length=100)
    items = Text(required=True)  # JSON: list of {"book_id", "quantity"}
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    zip_code = String(required=True, max_length=20)
    phone = String(max_length=30)


def merge_lines(items_data) -> "OrderedDict[str, int]":
    """Collapse repeated books into one line, summing quantities. First-seen order is kept."""
    merged = OrderedDict()
    for index, line in enumerate(items_data):
        book_id = line.get("book_id")
        quantity = line.get("quantity")
        if not book_id:
            raise ValidationError({"items": [f"Line {index + 1} has no book_id"]})
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValidationError({"items": [f"Line {index + 1} needs a positive whole quantity"]})
        merged[str(book_id)] = merged.get(str(book_id), 0) + quantity
    return merged


@bookstore.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not items_data:
            raise ValidationError({"items": ["An order needs at least one item"]})

        lines = merge_lines(items_data)
        book_repo = current_domain.repository_for(Book)

        # Validate every line before touching the ledger
        books = []
        for book_id, quantity in lines.items():
            book = book_repo.get(book_id)
            book.ensure_stock_for(quantity)
            books.append((book, quantity))

        address = ShippingAddress.record(
            street=command.street,
            city=command.city,
            state=command.state,
            zip_code=command.zip_code,
            phone=command.phone,
        )
        current_domain.repository_for(ShippingAddress).add(address)

        order = Order.place(
            user_id=command.user_id,
            shipping_address_id=str(address.id),
            lines=books,
            customer_name=command.customer_name,
        )

        for book, quantity in books:
            book.decrement_stock(quantity, order_id=str(order.id))
            book_repo.add(book)

        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            items=len(books),
            total=order.total,
        )
        return str(order.id)
