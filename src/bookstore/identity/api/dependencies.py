"""FastAPI dependencies that resolve the caller of a request.

Handlers receive an explicit `AuthContext` instead of reading user state off
the request.
"""

from fastapi import Cookie, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.errors import InvalidSession
from bookstore.identity.authorization import AuthContext, Capability, authorize
from bookstore.identity.session import COOKIE_NAME, read_token
from bookstore.identity.user import User


async def current_user(token: str | None = Cookie(default=None, alias=COOKIE_NAME)) -> AuthContext:
    user_id = read_token(token)
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise InvalidSession("Account no longer exists") from None
    return AuthContext.for_user(user)


def requires(capability: Capability):
    """Dependency factory: the caller must hold `capability`."""

    async def dependency(context: AuthContext = Depends(current_user)) -> AuthContext:
        return authorize(context, capability)

    return dependency
