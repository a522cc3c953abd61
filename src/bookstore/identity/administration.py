"""Account administration: commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bookstore.cart.cart_item import CartItem
from bookstore.domain import bookstore
from bookstore.errors import DuplicateEmail
from bookstore.identity.user import User

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="User")
class UpdateUser:
    user_id = Identifier(required=True)
    name = String(max_length=100)
    email = String(max_length=254)
    phone = String(max_length=30)
    location = String(max_length=255)
    role = String(max_length=10)


@bookstore.command(part_of="User")
class RemoveUser:
    user_id = Identifier(required=True)


@bookstore.command_handler(part_of=User)
class UserAdministrationHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        if command.email:
            holder = repo.find_by_email(command.email)
            if holder is not None and str(holder.id) != str(user.id):
                raise DuplicateEmail(command.email)

        user.update_account(
            name=command.name,
            email=command.email,
            phone=command.phone,
            location=command.location,
            role=command.role,
        )
        repo.add(user)

    @handle(RemoveUser)
    def remove_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        cart_repo = current_domain.repository_for(CartItem)
        cart_rows = cart_repo.for_user(user.id)
        for row in cart_rows:
            cart_repo._dao.delete(row)

        repo._dao.delete(user)
        logger.info("User removed", user_id=str(command.user_id), cart_rows_removed=len(cart_rows))
