"""User registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.errors import DuplicateEmail
from bookstore.identity.user import User


@bookstore.command(part_of="User")
class RegisterUser:
    """Create a customer account. New accounts always start with the USER role."""

    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)
    phone = String(max_length=30)
    location = String(max_length=255)


@bookstore.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise DuplicateEmail(command.email)

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            phone=command.phone,
            location=command.location,
        )
        repo.add(user)
        return str(user.id)
