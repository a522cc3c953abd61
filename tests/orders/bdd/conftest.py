"""Shared BDD fixtures and step definitions for checkout."""

import json

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from bookstore.catalogue.book import Book
from bookstore.catalogue.creation import CreateBook
from bookstore.orders.order import Order
from bookstore.orders.placement import PlaceOrder
from bookstore.orders.shipping_address import ShippingAddress

ADDRESS = {"street": "12 Quay Street", "city": "Dublin", "zip_code": "D02"}


@pytest.fixture()
def books():
    """Book ids by title."""
    return {}


@pytest.fixture()
def outcome():
    return {"order_id": None, "error": None}


@pytest.fixture()
def place_order(books):
    """Place an order for (title, quantity) lines and return its id."""

    def _place(lines):
        items = [{"book_id": books[title], "quantity": quantity} for title, quantity in lines]
        return current_domain.process(
            PlaceOrder(user_id="cust-001", customer_name="Ada", items=json.dumps(items), **ADDRESS),
            asynchronous=False,
        )

    return _place


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a book "{title}" priced {price:f} with {stock:d} in stock'))
def a_book(books, title, price, stock):
    books[title] = current_domain.process(
        CreateBook(title=title, author="Anon", price=price, stock=stock),
        asynchronous=False,
    )


@given(parsers.cfparse('a customer has ordered {quantity:d} of "{title}"'))
def an_existing_order(place_order, outcome, quantity, title):
    outcome["order_id"] = place_order([(title, quantity)])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{title}" has {stock:d} in stock'))
def book_has_stock(books, title, stock):
    assert current_domain.repository_for(Book).get(books[title]).stock == stock


@then(parsers.re(r"there (?:is|are) (?P<count>\d+) orders?"), converters={"count": int})
def order_count(count):
    assert len(current_domain.repository_for(Order)._dao.query.all().items) == count


@then(parsers.re(r"there (?:is|are) (?P<count>\d+) shipping address(?:es)?"), converters={"count": int})
def address_count(count):
    assert len(current_domain.repository_for(ShippingAddress)._dao.query.all().items) == count
