"""Cart management: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from bookstore.cart.cart_item import CartItem
from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.identity.user import User

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="CartItem")
class AddToCart:
    user_id = Identifier(required=True)
    book_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@bookstore.command(part_of="CartItem")
class UpdateCartItem:
    """Set the quantity of a row. Zero or less removes the row."""

    cart_item_id = Identifier(required=True)
    quantity = Integer(required=True)


@bookstore.command(part_of="CartItem")
class RemoveCartItem:
    cart_item_id = Identifier(required=True)


@bookstore.command(part_of="CartItem")
class ClearCart:
    user_id = Identifier(required=True)


@bookstore.command_handler(part_of=CartItem)
class CartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        current_domain.repository_for(User).get(command.user_id)
        book = current_domain.repository_for(Book).get(command.book_id)

        repo = current_domain.repository_for(CartItem)
        quantity = command.quantity or 1
        existing = repo.find_for(command.user_id, command.book_id)

        if existing is None:
            book.ensure_stock_for(quantity)
            item = CartItem.create(user_id=command.user_id, book_id=command.book_id, quantity=quantity)
        else:
            book.ensure_stock_for(existing.quantity + quantity)
            existing.increase(quantity)
            item = existing

        repo.add(item)
        return str(item.id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.cart_item_id)

        if command.quantity <= 0:
            repo._dao.delete(item)
            return None

        item.change_quantity(command.quantity)
        repo.add(item)
        return str(item.id)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.cart_item_id)
        repo._dao.delete(item)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(CartItem)
        rows = repo.for_user(command.user_id)
        for row in rows:
            repo._dao.delete(row)

        logger.info("Cart cleared", user_id=str(command.user_id), rows_removed=len(rows))
        return len(rows)
