"""Repository for the User aggregate."""

from bookstore.domain import bookstore
from bookstore.identity.user import User, normalize_email
from bookstore.utils.query import fetch_all, matching_any, paginate


@bookstore.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=normalize_email(email)).limit(1).all().items
        return results[0] if results else None

    def everyone(self) -> list[User]:
        return fetch_all(self._dao.query)

    def page(self, page=1, limit=20):
        return paginate(self._dao.query, page=page, limit=limit)

    def with_role(self, role: str) -> list[User]:
        return fetch_all(self._dao.query.filter(role=role))

    def search(self, term: str) -> list[User]:
        """Users whose name or email contains `term`."""
        return fetch_all(self._dao.query.filter(matching_any(term, "name", "email")))
