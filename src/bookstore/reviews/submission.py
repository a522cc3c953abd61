"""PostComment: a signed-in reader comments on an existing book."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.domain import bookstore
from bookstore.reviews.comment import Comment


@bookstore.command(part_of="Comment")
class PostComment:
    book_id = Identifier(required=True)
    user_id = Identifier(required=True)
    user_name = String(max_length=100)
    rating = Integer(required=True, min_value=1, max_value=5)
    text = Text(required=True)


@bookstore.command_handler(part_of=Comment)
class PostCommentHandler:
    @handle(PostComment)
    def post_comment(self, command):
        current_domain.repository_for(Book).get(command.book_id)

        comment = Comment.post(
            book_id=command.book_id,
            user_id=command.user_id,
            user_name=command.user_name,
            rating=command.rating,
            text=command.text,
        )
        current_domain.repository_for(Comment).add(comment)
        return str(comment.id)
