"""One-way password hashing."""

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a candidate password with a stored hash in constant time."""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)
