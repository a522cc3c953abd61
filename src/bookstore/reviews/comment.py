"""Comment aggregate: a rated reader comment on a book."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from bookstore.domain import bookstore
from bookstore.reviews.events import CommentEdited, CommentPosted


@bookstore.aggregate
class Comment:
    book_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_name = String(max_length=100)
    rating = Integer(required=True, min_value=1, max_value=5)
    text = Text(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def text_must_not_be_blank(self):
        if not (self.text or "").strip():
            raise ValidationError({"text": ["Comment text must not be blank"]})

    @classmethod
    def post(cls, book_id, user_id, user_name, rating, text):
        now = datetime.now(UTC)
        comment = cls(
            book_id=book_id,
            user_id=user_id,
            user_name=user_name,
            rating=rating,
            text=text,
            created_at=now,
            updated_at=now,
        )
        comment.raise_(
            CommentPosted(
                comment_id=str(comment.id),
                book_id=str(book_id),
                user_id=str(user_id),
                rating=rating,
                posted_at=now,
            )
        )
        return comment

    def edit(self, text=None, rating=None):
        if text is not None:
            self.text = text
        if rating is not None:
            self.rating = rating
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CommentEdited(
                comment_id=str(self.id),
                rating=self.rating,
                edited_at=self.updated_at,
            )
        )
