"""Integration tests for the order endpoints."""

from datetime import UTC, datetime, timedelta

import pytest
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.orders.order import Order
from bookstore.orders.shipping_address import ShippingAddress


@pytest.fixture()
def reader(client, register_user, login):
    user_id = register_user()
    login(client)
    return user_id


def _as_admin(client, register_user, login):
    register_user(name="Root", email="root@example.com", admin=True)
    login(client, email="root@example.com")


def _order_body(address, *lines):
    return {
        "shipping_address": address,
        "items": [{"book_id": book_id, "quantity": quantity} for book_id, quantity in lines],
    }


class TestPlaceOrder:
    def test_place_order(self, client, reader, create_book, address):
        book_id = create_book(price=10.0, stock=5)
        response = client.post("/orders", json={**_order_body(address, (book_id, 3)), "total": 0.01})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "PENDING"
        assert body["total"] == 30.0
        assert body["customer_name"] == "Ada Reader"
        assert body["shipping_address"]["city"] == "Dublin"
        assert [(item["title"], item["quantity"]) for item in body["items"]] == [("Dune", 3)]
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_oversell_is_rejected_and_nothing_persisted(self, client, reader, create_book, address):
        book_id = create_book(stock=5)
        assert client.post("/orders", json=_order_body(address, (book_id, 3))).status_code == 201

        response = client.post("/orders", json=_order_body(address, (book_id, 3)))

        assert response.status_code == 400
        assert response.json()["available"] == 2
        assert len(current_domain.repository_for(Order)._dao.query.all().items) == 1
        assert len(current_domain.repository_for(ShippingAddress)._dao.query.all().items) == 1
        assert current_domain.repository_for(Book).get(book_id).stock == 2

    def test_empty_items(self, client, reader, address):
        assert client.post("/orders", json=_order_body(address)).status_code == 400

    def test_requires_address_fields(self, client, reader, create_book):
        body = {"shipping_address": {"street": "1 Main"}, "items": [{"book_id": create_book(), "quantity": 1}]}
        assert client.post("/orders", json=body).status_code == 422

    def test_my_orders(self, client, reader, create_book, address):
        client.post("/orders", json=_order_body(address, (create_book(), 1)))
        orders = client.get("/orders/my").json()
        assert len(orders) == 1
        assert orders[0]["user_id"] == reader


class TestOrderAdministration:
    def _place(self, client, create_book, address, quantity=1):
        return self._place_book(client, create_book(), address, quantity)

    def _place_book(self, client, book_id, address, quantity=1):
        return client.post("/orders", json=_order_body(address, (book_id, quantity))).json()["id"]

    def test_listing_is_admin_only(self, client, reader):
        assert client.get("/orders").status_code == 403
        assert client.get("/orders/stats").status_code == 403

    def test_stats_and_status_filter(self, client, register_user, login, create_book, address):
        register_user()
        login(client)
        first = self._place(client, create_book, address)
        self._place(client, create_book, address)

        _as_admin(client, register_user, login)
        assert client.put(f"/orders/{first}/status", json={"status": "shipped"}).status_code == 200

        assert client.get("/orders/stats").json() == {"PENDING": 1, "PROCESSING": 0, "SHIPPED": 1, "DELIVERED": 0}
        assert [o["id"] for o in client.get("/orders/status/SHIPPED").json()] == [first]
        assert client.get("/orders/status/LOST").status_code == 400
        assert client.get("/orders", params={"limit": 1}).json()["meta"]["total_pages"] == 2

    def test_unknown_status_update(self, client, register_user, login, create_book, address):
        register_user()
        login(client)
        order_id = self._place(client, create_book, address)

        _as_admin(client, register_user, login)
        assert client.put(f"/orders/{order_id}/status", json={"status": "LOST"}).status_code == 400

    def test_date_range(self, client, register_user, login, create_book, address):
        register_user()
        login(client)
        self._place(client, create_book, address)
        _as_admin(client, register_user, login)

        today = datetime.now(UTC).date()
        yesterday = today - timedelta(days=1)
        assert len(client.get("/orders/date-range", params={"start": str(today), "end": str(today)}).json()) == 1
        assert client.get("/orders/date-range", params={"start": str(yesterday), "end": str(yesterday)}).json() == []
        assert client.get("/orders/date-range", params={"start": str(today)}).status_code == 400

    def test_owner_or_admin_can_read(self, client, register_user, login, create_book, address):
        register_user()
        register_user(name="Bob", email="bob@example.com")
        login(client)
        order_id = self._place(client, create_book, address)
        assert client.get(f"/orders/{order_id}").status_code == 200

        login(client, email="bob@example.com")
        assert client.get(f"/orders/{order_id}").status_code == 403

    def test_admin_delete_restores_stock_and_address(self, client, register_user, login, create_book, address):
        register_user()
        login(client)
        book_id = create_book(stock=5)
        order_id = self._place_book(client, book_id, address, quantity=2)

        _as_admin(client, register_user, login)
        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 200
        assert current_domain.repository_for(Book).get(book_id).stock == 5
        assert current_domain.repository_for(ShippingAddress)._dao.query.all().items == []
        assert client.get(f"/orders/{order_id}").status_code == 404

    def test_owner_cannot_delete_a_delivered_order(self, client, register_user, login, create_book, address):
        register_user()
        login(client)
        book_id = create_book(stock=5)
        order_id = self._place_book(client, book_id, address, quantity=3)

        _as_admin(client, register_user, login)
        client.put(f"/orders/{order_id}/status", json={"status": "DELIVERED"})

        login(client)
        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 403
        assert current_domain.repository_for(Order).get(order_id).status == "DELIVERED"
        assert current_domain.repository_for(Book).get(book_id).stock == 2
