"""Credential checks for login."""

import structlog
from protean.utils.globals import current_domain

from bookstore.errors import Unauthenticated
from bookstore.identity.user import User

logger = structlog.get_logger(__name__)


def authenticate(email, password) -> User:
    """Return the user matching the credentials, or raise Unauthenticated.

    Unknown emails and wrong passwords produce the same error.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("Login rejected", email=email)
        raise Unauthenticated("Invalid credentials")
    return user
