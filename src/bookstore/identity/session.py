"""Signed session tokens carried in an httpOnly cookie."""

import os
from datetime import UTC, datetime, timedelta

import jwt

from bookstore.errors import InvalidSession, Unauthenticated

COOKIE_NAME = "token"
ALGORITHM = "HS256"

REGISTRATION_TTL = timedelta(days=1)
LOGIN_TTL = timedelta(days=7)


def _secret() -> str:
    return os.environ.get("SECRET_KEY", "dev-secret-change-me")


def issue_token(user_id, ttl: timedelta = LOGIN_TTL) -> str:
    now = datetime.now(UTC)
    payload = {"sub": str(user_id), "iat": now, "exp": now + ttl}
    return jwt.encode(payload, _secret(), algorithm=ALGORITHM)


def read_token(token: str) -> str:
    """Return the user id carried by a token, or raise Unauthenticated."""
    if not token:
        raise Unauthenticated()
    try:
        payload = jwt.decode(token, _secret(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise InvalidSession("Session expired") from None
    except jwt.InvalidTokenError:
        raise InvalidSession() from None

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidSession()
    return user_id


def cookie_settings(ttl: timedelta) -> dict:
    """Keyword arguments for `Response.set_cookie`."""
    production = os.environ.get("PROTEAN_ENV") == "production"
    return {
        "key": COOKIE_NAME,
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "lax",
        "max_age": int(ttl.total_seconds()),
    }
