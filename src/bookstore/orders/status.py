"""Administrative order status changes."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.orders.order import Order


@bookstore.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@bookstore.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_status(command.status)
        repo.add(order)
