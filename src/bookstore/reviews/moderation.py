"""Comment moderation: administrators edit or delete comments."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from bookstore.domain import bookstore
from bookstore.reviews.comment import Comment

logger = structlog.get_logger(__name__)


@bookstore.command(part_of="Comment")
class EditComment:
    comment_id = Identifier(required=True)
    text = Text()
    rating = Integer(min_value=1, max_value=5)


@bookstore.command(part_of="Comment")
class RemoveComment:
    comment_id = Identifier(required=True)


@bookstore.command_handler(part_of=Comment)
class CommentModerationHandler:
    @handle(EditComment)
    def edit_comment(self, command):
        repo = current_domain.repository_for(Comment)
        comment = repo.get(command.comment_id)
        comment.edit(text=command.text, rating=command.rating)
        repo.add(comment)

    @handle(RemoveComment)
    def remove_comment(self, command):
        repo = current_domain.repository_for(Comment)
        comment = repo.get(command.comment_id)
        repo._dao.delete(comment)
        logger.info("Comment removed", comment_id=str(command.comment_id), book_id=str(comment.book_id))
