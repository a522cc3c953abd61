"""Pydantic request/response schemas for the comments API."""

from datetime import datetime

from pydantic import BaseModel, Field


class PostCommentRequest(BaseModel):
    book_id: str
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=1)


class EditCommentRequest(BaseModel):
    text: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)


class CommentResponse(BaseModel):
    id: str
    book_id: str
    user_id: str
    user_name: str | None = None
    rating: int
    text: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class BookCommentStatsResponse(BaseModel):
    book_id: str
    count: int
    average_rating: float
    comments: list[CommentResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
