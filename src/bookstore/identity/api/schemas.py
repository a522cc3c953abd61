"""Pydantic request/response schemas for authentication and user accounts."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str
    password: str = Field(min_length=1, max_length=128)
    phone: str | None = None
    location: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Reader",
                    "email": "ada@example.com",
                    "password": "correct horse battery staple",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str
    password: str


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    phone: str | None = None
    location: str | None = None


class UpdateUserRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    role: str | None = None


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    location: str | None = None
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class UserPageResponse(BaseModel):
    data: list[UserResponse]
    meta: PageMeta


class UserCommentResponse(BaseModel):
    id: str
    book_id: str
    rating: int
    text: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class StatusResponse(BaseModel):
    status: str = "ok"
