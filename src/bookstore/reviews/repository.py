"""Repository for the Comment aggregate."""

from bookstore.domain import bookstore
from bookstore.reviews.comment import Comment
from bookstore.utils.query import fetch_all


@bookstore.repository(part_of=Comment)
class CommentRepository:
    def everything(self) -> list[Comment]:
        return fetch_all(self._dao.query)

    def for_book(self, book_id) -> list[Comment]:
        return fetch_all(self._dao.query.filter(book_id=str(book_id)))

    def for_user(self, user_id) -> list[Comment]:
        return fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def stats_for_book(self, book_id) -> dict:
        """Comment count and average rating, rounded to one decimal."""
        comments = self.for_book(book_id)
        total = len(comments)
        average = round(sum(c.rating for c in comments) / total, 1) if total else 0.0
        return {"count": total, "average_rating": average}
