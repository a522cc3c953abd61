"""Who is calling, and what they may do.

Every admin-only operation is gated by a single `authorize` call naming the
capability it needs, instead of comparing roles at each call site.
"""

from dataclasses import dataclass
from enum import Enum

from bookstore.errors import Forbidden
from bookstore.identity.user import Role


class Capability(Enum):
    MANAGE_CATALOGUE = "manage_catalogue"
    ADJUST_STOCK = "adjust_stock"
    MANAGE_ORDERS = "manage_orders"
    MANAGE_USERS = "manage_users"
    MODERATE_COMMENTS = "moderate_comments"
    MANAGE_CARTS = "manage_carts"


_CAPABILITIES_BY_ROLE = {
    Role.USER.value: frozenset(),
    Role.ADMIN.value: frozenset(Capability),
}


@dataclass(frozen=True)
class AuthContext:
    """The authenticated caller of one request."""

    user_id: str
    name: str
    email: str
    role: str

    @classmethod
    def for_user(cls, user):
        return cls(user_id=str(user.id), name=user.name, email=user.email, role=user.role)

    def can(self, capability: Capability) -> bool:
        return capability in _CAPABILITIES_BY_ROLE.get(self.role, frozenset())

    def owns(self, user_id) -> bool:
        return str(user_id) == self.user_id


def authorize(context: AuthContext, capability: Capability) -> AuthContext:
    if not context.can(capability):
        raise Forbidden(f"Access denied: {capability.value} requires administrator rights")
    return context


def authorize_owner(context: AuthContext, owner_id, capability: Capability) -> AuthContext:
    """Let the owner through; anybody else needs `capability`."""
    if context.owns(owner_id):
        return context
    return authorize(context, capability)
