"""Pydantic request/response schemas for the cart API."""

from datetime import datetime

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    book_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int


class CartBookSummary(BaseModel):
    id: str
    title: str
    author: str
    price: float
    stock: int
    image: str | None = None

    model_config = {"from_attributes": True}


class CartItemResponse(BaseModel):
    id: str
    user_id: str
    book_id: str
    quantity: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    book: CartBookSummary | None = None

    model_config = {"from_attributes": True}


class ClearCartResponse(BaseModel):
    removed: int


class StatusResponse(BaseModel):
    status: str = "ok"
