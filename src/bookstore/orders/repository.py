"""Repository for the Order aggregate."""

from datetime import UTC, datetime, time, timedelta

from bookstore.domain import bookstore
from bookstore.orders.order import Order, OrderStatus
from bookstore.utils.query import count, fetch_all, paginate


def _start_of(day) -> datetime:
    return datetime.combine(day, time.min, tzinfo=UTC)


@bookstore.repository(part_of=Order)
class OrderRepository:
    def everything(self) -> list[Order]:
        return fetch_all(self._dao.query)

    def page(self, page=1, limit=20):
        return paginate(self._dao.query, page=page, limit=limit)

    def for_user(self, user_id) -> list[Order]:
        return fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def with_status(self, status: str) -> list[Order]:
        return fetch_all(self._dao.query.filter(status=status))

    def with_shipping_address(self, address_id) -> list[Order]:
        return fetch_all(self._dao.query.filter(shipping_address_id=str(address_id)))

    def between(self, start, end) -> list[Order]:
        """Orders created on any day from `start` to `end`, both inclusive."""
        query = self._dao.query.filter(
            created_at__gte=_start_of(start),
            created_at__lt=_start_of(end + timedelta(days=1)),
        )
        return fetch_all(query)

    def stats(self) -> dict[str, int]:
        """Order count per status. Every status is present, even at zero."""
        return {status.value: count(self._dao.query.filter(status=status.value)) for status in OrderStatus}
