"""Repository for CartItem rows."""

from bookstore.cart.cart_item import CartItem
from bookstore.domain import bookstore
from bookstore.utils.query import fetch_all


@bookstore.repository(part_of=CartItem)
class CartItemRepository:
    def find_for(self, user_id, book_id) -> CartItem | None:
        rows = self._dao.query.filter(user_id=str(user_id), book_id=str(book_id)).limit(1).all().items
        return rows[0] if rows else None

    def for_user(self, user_id) -> list[CartItem]:
        return fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def for_book(self, book_id) -> list[CartItem]:
        return fetch_all(self._dao.query.filter(book_id=str(book_id)))

    def everything(self) -> list[CartItem]:
        return fetch_all(self._dao.query)
