"""Self-service profile updates: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.identity.user import User


@bookstore.command(part_of="User")
class UpdateProfile:
    user_id = Identifier(required=True)
    name = String(max_length=100)
    phone = String(max_length=30)
    location = String(max_length=255)


@bookstore.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_profile(
            name=command.name,
            phone=command.phone,
            location=command.location,
        )
        repo.add(user)
