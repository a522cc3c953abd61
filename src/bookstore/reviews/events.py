"""Domain events for the Comment aggregate."""

from protean.fields import DateTime, Identifier, Integer

from bookstore.domain import bookstore


@bookstore.event(part_of="Comment")
class CommentPosted:
    """A reader left a rated comment on a book."""

    __version__ = 1

    comment_id = Identifier(required=True)
    book_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True)
    posted_at = DateTime(required=True)


@bookstore.event(part_of="Comment")
class CommentEdited:
    """A moderator changed the text or rating of a comment."""

    __version__ = 1

    comment_id = Identifier(required=True)
    rating = Integer()
    edited_at = DateTime(required=True)
