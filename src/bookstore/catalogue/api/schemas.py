"""Pydantic request/response schemas for the catalogue API.

These are the external contracts of the HTTP layer, kept separate from the
Protean commands they are translated into.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CreateBookRequest(BaseModel):
    title: str
    author: str
    price: float = Field(ge=0)
    original_price: float | None = Field(default=None, ge=0)
    category: str | None = None
    language: str | None = None
    stock: int = Field(default=0, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    total_ratings: int | None = Field(default=None, ge=0)
    description: str | None = None
    image: str | None = None
    featured: bool = False
    is_new: bool = False

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "The Left Hand of Darkness",
                    "author": "Ursula K. Le Guin",
                    "price": 14.5,
                    "category": "Science Fiction",
                    "stock": 12,
                }
            ]
        }
    }


class UpdateBookRequest(BaseModel):
    title: str | None = None
    author: str | None = None
    price: float | None = Field(default=None, ge=0)
    original_price: float | None = Field(default=None, ge=0)
    category: str | None = None
    language: str | None = None
    stock: int | None = Field(default=None, ge=0)
    rating: float | None = Field(default=None, ge=0, le=5)
    total_ratings: int | None = Field(default=None, ge=0)
    description: str | None = None
    image: str | None = None
    featured: bool | None = None
    is_new: bool | None = None


class DecrementStockRequest(BaseModel):
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class BookResponse(BaseModel):
    id: str
    title: str
    author: str
    price: float
    original_price: float | None = None
    category: str | None = None
    language: str | None = None
    stock: int
    rating: float | None = None
    total_ratings: int | None = None
    description: str | None = None
    image: str | None = None
    featured: bool = False
    is_new: bool = Field(default=False, validation_alias="new_arrival")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class BookCommentResponse(BaseModel):
    id: str
    user_id: str
    user_name: str | None = None
    rating: int
    text: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class BookDetailResponse(BookResponse):
    comments: list[BookCommentResponse] = []


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class BookPageResponse(BaseModel):
    data: list[BookResponse]
    meta: PageMeta


class StockResponse(BaseModel):
    book_id: str
    stock: int


class UploadResponse(BaseModel):
    image: str


class StatusResponse(BaseModel):
    status: str = "ok"
