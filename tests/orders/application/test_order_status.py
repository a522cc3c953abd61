"""Application tests for UpdateOrderStatus."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from bookstore.orders.order import Order
from bookstore.orders.placement import PlaceOrder
from bookstore.orders.status import UpdateOrderStatus


@pytest.fixture()
def order_id(create_book, address):
    return current_domain.process(
        PlaceOrder(user_id="user-1", items=json.dumps([{"book_id": create_book(), "quantity": 1}]), **address),
        asynchronous=False,
    )


def _status(order_id):
    return current_domain.repository_for(Order).get(order_id).status


class TestUpdateOrderStatus:
    def test_status_persisted(self, order_id):
        current_domain.process(UpdateOrderStatus(order_id=order_id, status="SHIPPED"), asynchronous=False)
        assert _status(order_id) == "SHIPPED"

    def test_any_valid_status_can_follow_another(self, order_id):
        for status in ("DELIVERED", "PROCESSING", "PENDING"):
            current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)
            assert _status(order_id) == status

    def test_unknown_status_rejected(self, order_id):
        with pytest.raises(ValidationError):
            current_domain.process(UpdateOrderStatus(order_id=order_id, status="LOST"), asynchronous=False)
        assert _status(order_id) == "PENDING"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateOrderStatus(order_id="missing", status="SHIPPED"), asynchronous=False)
