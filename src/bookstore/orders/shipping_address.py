"""ShippingAddress aggregate and its repository.

An address row is created together with the order that references it. Order
deletion asks the repository to collect the address once no order points at
it any more.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, String
from protean.utils.globals import current_domain

from bookstore.domain import bookstore


@bookstore.aggregate
class ShippingAddress:
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    zip_code = String(required=True, max_length=20)
    phone = String(max_length=30)
    created_at = DateTime()

    @classmethod
    def record(cls, street, city, zip_code, state=None, phone=None):
        return cls(
            street=street,
            city=city,
            state=state,
            zip_code=zip_code,
            phone=phone,
            created_at=datetime.now(UTC),
        )


@bookstore.repository(part_of=ShippingAddress)
class ShippingAddressRepository:
    def collect_if_orphaned(self, address_id, ignoring=None) -> bool:
        """Delete the address when no order other than `ignoring` references it.

        Returns True if the address was deleted.
        """
        from bookstore.orders.order import Order

        referencing = current_domain.repository_for(Order).with_shipping_address(address_id)
        if any(str(order.id) != str(ignoring) for order in referencing):
            return False

        address = self.get(str(address_id))
        self._dao.delete(address)
        return True
