"""User aggregate: account, credentials and role."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from bookstore.domain import bookstore
from bookstore.identity.events import UserAccountUpdated, UserProfileUpdated, UserRegistered
from bookstore.identity.passwords import hash_password, verify_password

# Characters that never appear in the addresses we accept
_FORBIDDEN_EMAIL_CHARS = (" ", "\t", "\n", ";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


class Role(Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def normalize_email(email):
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    """Structural check: exactly one @, dotted domain, no empty or dotted-edge parts."""
    if not email or email.count("@") != 1:
        return False
    if any(char in email for char in _FORBIDDEN_EMAIL_CHARS):
        return False

    local_part, domain_part = email.split("@", 1)
    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False
    if not domain_part or "." not in domain_part:
        return False
    if domain_part.startswith(".") or domain_part.endswith("."):
        return False
    if ".." in local_part or ".." in domain_part:
        return False
    return all(label and not label.startswith("-") and not label.endswith("-") for label in domain_part.split("."))


@bookstore.aggregate
class User:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)
    phone = String(max_length=30)
    location = String(max_length=255)
    role = String(choices=Role, default=Role.USER.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @property
    def is_admin(self):
        return self.role == Role.ADMIN.value

    @classmethod
    def register(cls, name, email, password, phone=None, location=None, role=None):
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        now = datetime.now(UTC)
        user = cls(
            name=name,
            email=normalize_email(email),
            password_hash=hash_password(password),
            phone=phone,
            location=location,
            role=role or Role.USER.value,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                name=user.name,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def update_profile(self, name=None, phone=None, location=None):
        if name is not None:
            self.name = name
        if phone is not None:
            self.phone = phone
        if location is not None:
            self.location = location
        self.updated_at = datetime.now(UTC)

        self.raise_(
            UserProfileUpdated(
                user_id=str(self.id),
                name=self.name,
                phone=self.phone,
                location=self.location,
            )
        )

    def update_account(self, name=None, email=None, phone=None, location=None, role=None):
        """Administrative edit. Email uniqueness is checked by the caller."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = normalize_email(email)
        if phone is not None:
            self.phone = phone
        if location is not None:
            self.location = location
        if role is not None:
            self.role = role
        self.updated_at = datetime.now(UTC)

        self.raise_(
            UserAccountUpdated(
                user_id=str(self.id),
                email=self.email,
                role=self.role,
            )
        )
