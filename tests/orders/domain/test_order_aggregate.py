"""Tests for the Order aggregate and its item snapshots."""

import pytest
from protean.exceptions import ValidationError

from bookstore.catalogue.book import Book
from bookstore.orders.events import OrderPlaced, OrderStatusChanged
from bookstore.orders.order import Order, OrderItem, OrderStatus


@pytest.fixture()
def dune():
    return Book.create(title="Dune", author="Frank Herbert", price=10.0, stock=5)


@pytest.fixture()
def emma():
    return Book.create(title="Emma", author="Jane Austen", price=7.25, stock=3)


def _place(lines, **overrides):
    defaults = {"user_id": "user-1", "shipping_address_id": "addr-1", "customer_name": "Ada"}
    defaults.update(overrides)
    return Order.place(lines=lines, **defaults)


class TestOrderPlacement:
    def test_place_snapshots_title_and_price(self, dune):
        order = _place([(dune, 2)])
        item = order.items[0]
        assert item.book_id == str(dune.id)
        assert item.title == "Dune"
        assert item.price == 10.0
        assert item.quantity == 2

    def test_total_is_computed_from_lines(self, dune, emma):
        order = _place([(dune, 2), (emma, 1)])
        assert order.total == 27.25

    def test_new_order_is_pending(self, dune):
        assert _place([(dune, 1)]).status == OrderStatus.PENDING.value

    def test_snapshot_survives_book_edits(self, dune):
        order = _place([(dune, 1)])
        dune.update_details(title="Dune (Deluxe)", price=30.0)
        assert order.items[0].title == "Dune"
        assert order.items[0].price == 10.0

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _place([])
        assert "items" in exc.value.messages

    def test_place_raises_order_placed(self, dune, emma):
        order = _place([(dune, 1), (emma, 2)])
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.item_count == 2
        assert event.total == order.total


class TestOrderStatus:
    def test_change_status(self, dune):
        order = _place([(dune, 1)])
        order.change_status("SHIPPED")
        assert order.status == "SHIPPED"
        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "PENDING"

    def test_any_known_status_may_follow_any_other(self, dune):
        order = _place([(dune, 1)])
        order.change_status("DELIVERED")
        order.change_status("PROCESSING")
        assert order.status == "PROCESSING"

    def test_unknown_status_rejected(self, dune):
        order = _place([(dune, 1)])
        with pytest.raises(ValidationError):
            order.change_status("LOST")
        assert order.status == "PENDING"


class TestOrderItem:
    def test_line_total(self):
        item = OrderItem(book_id="book-1", title="Dune", price=10.0, quantity=3)
        assert item.line_total == 30.0

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            OrderItem(book_id="book-1", title="Dune", price=10.0, quantity=0)

    def test_clear_items(self, dune, emma):
        order = _place([(dune, 1), (emma, 1)])
        removed = order.clear_items()
        assert len(removed) == 2
        assert len(order.items) == 0
