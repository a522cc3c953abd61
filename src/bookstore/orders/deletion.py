"""Order deletion: restores stock and collects the orphaned shipping address."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.orders.order import Order
from bookstore.orders.shipping_address import ShippingAddress

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@bookstore.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order_repo = current_domain.repository_for(Order)
        book_repo = current_domain.repository_for(Book)
        order = order_repo.get(command.order_id)

        restored = 0
        for item in order.items:
            try:
                book = book_repo.get(item.book_id)
            except ObjectNotFoundError:
                logger.warning(
                    "Book no longer exists; stock not restored",
                    order_id=str(order.id),
                    book_id=str(item.book_id),
                    quantity=item.quantity,
                )
                continue
            book.restore_stock(item.quantity, order_id=str(order.id))
            book_repo.add(book)
            restored += item.quantity

        address_id = order.shipping_address_id
        order.clear_items()
        order_repo.add(order)
        order_repo._dao.delete(order)

        collected = current_domain.repository_for(ShippingAddress).collect_if_orphaned(address_id, ignoring=order.id)

        logger.info(
            "Order deleted",
            order_id=str(command.order_id),
            units_restored=restored,
            address_collected=collected,
        )
