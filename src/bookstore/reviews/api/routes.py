"""FastAPI routes for reader comments."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from bookstore.catalogue.book import Book
from bookstore.identity.api.dependencies import current_user, requires
from bookstore.identity.authorization import AuthContext, Capability
from bookstore.reviews.api.schemas import (
    BookCommentStatsResponse,
    CommentResponse,
    EditCommentRequest,
    PostCommentRequest,
    StatusResponse,
)
from bookstore.reviews.comment import Comment
from bookstore.reviews.moderation import EditComment, RemoveComment
from bookstore.reviews.submission import PostComment

comment_router = APIRouter(prefix="/comments", tags=["comments"])

_moderator = requires(Capability.MODERATE_COMMENTS)


@comment_router.get("", response_model=list[CommentResponse])
async def list_comments() -> list[CommentResponse]:
    return [CommentResponse.model_validate(c) for c in current_domain.repository_for(Comment).everything()]


@comment_router.get("/{book_id}/stats", response_model=BookCommentStatsResponse)
async def book_comment_stats(book_id: str) -> BookCommentStatsResponse:
    book = current_domain.repository_for(Book).get(book_id)
    repo = current_domain.repository_for(Comment)
    stats = repo.stats_for_book(book.id)
    return BookCommentStatsResponse(
        book_id=str(book.id),
        count=stats["count"],
        average_rating=stats["average_rating"],
        comments=[CommentResponse.model_validate(c) for c in repo.for_book(book.id)],
    )


@comment_router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: str) -> CommentResponse:
    return CommentResponse.model_validate(current_domain.repository_for(Comment).get(comment_id))


@comment_router.post("", status_code=201, response_model=CommentResponse)
async def post_comment(body: PostCommentRequest, context: AuthContext = Depends(current_user)) -> CommentResponse:
    comment_id = current_domain.process(
        PostComment(
            book_id=body.book_id,
            user_id=context.user_id,
            user_name=context.name,
            rating=body.rating,
            text=body.text,
        ),
        asynchronous=False,
    )
    return CommentResponse.model_validate(current_domain.repository_for(Comment).get(comment_id))


@comment_router.put("/{comment_id}", response_model=CommentResponse)
async def edit_comment(
    comment_id: str,
    body: EditCommentRequest,
    context: AuthContext = Depends(_moderator),
) -> CommentResponse:
    current_domain.process(EditComment(comment_id=comment_id, text=body.text, rating=body.rating), asynchronous=False)
    return CommentResponse.model_validate(current_domain.repository_for(Comment).get(comment_id))


@comment_router.delete("/{comment_id}", response_model=StatusResponse)
async def delete_comment(comment_id: str, context: AuthContext = Depends(_moderator)) -> StatusResponse:
    current_domain.process(RemoveComment(comment_id=comment_id), asynchronous=False)
    return StatusResponse(status="deleted")
