"""Tests for the User aggregate."""

import pytest
from protean.exceptions import ValidationError

from bookstore.identity.events import UserAccountUpdated, UserProfileUpdated, UserRegistered
from bookstore.identity.user import Role, User, is_valid_email, normalize_email


def _user(**overrides):
    defaults = {"name": "Ada Reader", "email": "ada@example.com", "password": "s3cret-pass"}
    defaults.update(overrides)
    return User.register(**defaults)


class TestEmailRules:
    @pytest.mark.parametrize(
        "email",
        ["ada@example.com", "first.last@books.co.uk", "a+tag@sub.example.org"],
    )
    def test_valid_addresses(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["", "no-at-sign", "two@@example.com", "ada@localhost", ".ada@example.com", "ada@example..com", "a b@x.com"],
    )
    def test_invalid_addresses(self, email):
        assert not is_valid_email(email)

    def test_normalize_lowercases_and_strips(self):
        assert normalize_email("  Ada@Example.COM ") == "ada@example.com"


class TestRegistration:
    def test_register_hashes_password(self):
        user = _user()
        assert user.password_hash != "s3cret-pass"
        assert user.check_password("s3cret-pass")
        assert not user.check_password("wrong")

    def test_register_normalizes_email(self):
        user = _user(email="ADA@Example.com")
        assert user.email == "ada@example.com"

    def test_default_role_is_user(self):
        user = _user()
        assert user.role == Role.USER.value
        assert not user.is_admin

    def test_register_raises_event(self):
        user = _user()
        assert isinstance(user._events[0], UserRegistered)
        assert user._events[0].email == "ada@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _user(email="not-an-email")
        assert "email" in exc.value.messages

    def test_missing_password_rejected(self):
        with pytest.raises(ValidationError):
            _user(password="")

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            _user(role="SUPERUSER")


class TestAccountChanges:
    def test_update_profile_keeps_unset_fields(self):
        user = _user(phone="555-0100")
        user.update_profile(location="Dublin")
        assert user.phone == "555-0100"
        assert user.location == "Dublin"
        assert isinstance(user._events[-1], UserProfileUpdated)

    def test_update_account_can_promote(self):
        user = _user()
        user.update_account(role=Role.ADMIN.value)
        assert user.is_admin
        assert isinstance(user._events[-1], UserAccountUpdated)
