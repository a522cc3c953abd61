"""Tests for session tokens and capability checks."""

from datetime import timedelta

import pytest

from bookstore.errors import Forbidden, Unauthenticated
from bookstore.identity.authorization import AuthContext, Capability, authorize, authorize_owner
from bookstore.identity.session import (
    COOKIE_NAME,
    LOGIN_TTL,
    REGISTRATION_TTL,
    cookie_settings,
    issue_token,
    read_token,
)


def _context(role="USER", user_id="user-1"):
    return AuthContext(user_id=user_id, name="Ada", email="ada@example.com", role=role)


class TestSessionTokens:
    def test_token_round_trips_user_id(self):
        assert read_token(issue_token("user-1")) == "user-1"

    def test_missing_token_rejected(self):
        with pytest.raises(Unauthenticated):
            read_token(None)

    def test_tampered_token_rejected(self):
        token = issue_token("user-1")
        with pytest.raises(Unauthenticated):
            read_token(token[:-2] + "xx")

    def test_expired_token_rejected(self):
        token = issue_token("user-1", ttl=timedelta(seconds=-1))
        with pytest.raises(Unauthenticated) as exc:
            read_token(token)
        assert exc.value.message == "Session expired"

    def test_ttls(self):
        assert REGISTRATION_TTL == timedelta(days=1)
        assert LOGIN_TTL == timedelta(days=7)

    def test_cookie_settings_outside_production(self):
        settings = cookie_settings(LOGIN_TTL)
        assert settings["key"] == COOKIE_NAME
        assert settings["httponly"] is True
        assert settings["secure"] is False
        assert settings["samesite"] == "lax"
        assert settings["max_age"] == 7 * 24 * 3600


class TestAuthorize:
    def test_admin_holds_every_capability(self):
        context = _context(role="ADMIN")
        for capability in Capability:
            assert authorize(context, capability) is context

    def test_user_is_forbidden(self):
        with pytest.raises(Forbidden):
            authorize(_context(), Capability.MANAGE_CATALOGUE)

    def test_owner_passes_without_capability(self):
        context = _context(user_id="user-1")
        assert authorize_owner(context, "user-1", Capability.MANAGE_CARTS) is context

    def test_non_owner_needs_capability(self):
        with pytest.raises(Forbidden):
            authorize_owner(_context(user_id="user-1"), "user-2", Capability.MANAGE_CARTS)
