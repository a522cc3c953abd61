"""Application tests for DeleteOrder."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from bookstore.catalogue.book import Book
from bookstore.catalogue.removal import RemoveBook
from bookstore.orders.deletion import DeleteOrder
from bookstore.orders.order import Order
from bookstore.orders.placement import PlaceOrder
from bookstore.orders.shipping_address import ShippingAddress


def _place(book_id, quantity, address):
    return current_domain.process(
        PlaceOrder(user_id="user-1", items=json.dumps([{"book_id": book_id, "quantity": quantity}]), **address),
        asynchronous=False,
    )


class TestDeleteOrder:
    def test_restores_stock(self, create_book, address):
        dune = create_book(stock=5)
        order_id = _place(dune, 3, address)

        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)

        assert current_domain.repository_for(Book).get(dune).stock == 5
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get(order_id)

    def test_collects_orphaned_address(self, create_book, address):
        dune = create_book(stock=5)
        order_id = _place(dune, 1, address)
        address_id = current_domain.repository_for(Order).get(order_id).shipping_address_id

        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(ShippingAddress).get(address_id)

    def test_other_orders_keep_their_addresses(self, create_book, address):
        dune = create_book(stock=5)
        first = _place(dune, 1, address)
        second = _place(dune, 1, address)

        current_domain.process(DeleteOrder(order_id=first), asynchronous=False)

        remaining = current_domain.repository_for(Order).get(second)
        assert current_domain.repository_for(ShippingAddress).get(remaining.shipping_address_id)

    def test_skips_books_that_no_longer_exist(self, create_book, address):
        dune = create_book(stock=5)
        emma = create_book(title="Emma", author="Jane Austen", stock=5)
        order_id = current_domain.process(
            PlaceOrder(
                user_id="user-1",
                items=json.dumps([{"book_id": dune, "quantity": 2}, {"book_id": emma, "quantity": 1}]),
                **address,
            ),
            asynchronous=False,
        )
        current_domain.process(RemoveBook(book_id=emma), asynchronous=False)

        current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)

        assert current_domain.repository_for(Book).get(dune).stock == 5
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get(order_id)

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteOrder(order_id="missing"), asynchronous=False)
