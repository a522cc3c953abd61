"""FastAPI routes for the catalogue: browsing, admin editing and stock."""

import os
import shutil
from pathlib import Path
from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, File, Query, UploadFile
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookstore.catalogue.api.schemas import (
    BookCommentResponse,
    BookDetailResponse,
    BookPageResponse,
    BookResponse,
    CreateBookRequest,
    DecrementStockRequest,
    PageMeta,
    StatusResponse,
    StockResponse,
    UpdateBookRequest,
    UploadResponse,
)
from bookstore.catalogue.book import Book
from bookstore.catalogue.creation import CreateBook
from bookstore.catalogue.details import UpdateBook
from bookstore.catalogue.removal import RemoveBook
from bookstore.catalogue.stock import DecrementStock
from bookstore.identity.api.dependencies import requires
from bookstore.identity.authorization import AuthContext, Capability
from bookstore.reviews.comment import Comment

logger = structlog.get_logger(__name__)

book_router = APIRouter(prefix="/books", tags=["books"])


def upload_dir() -> Path:
    return Path(os.environ.get("UPLOAD_DIR", "uploads"))


def _books(records) -> list[BookResponse]:
    return [BookResponse.model_validate(book) for book in records]


def _split(values):
    """Accept both `?category=a&category=b` and `?category=a,b`."""
    if not values:
        return None
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


# ---------------------------------------------------------------------------
# Public reads
# ---------------------------------------------------------------------------
@book_router.get("", response_model=list[BookResponse])
async def list_books() -> list[BookResponse]:
    return _books(current_domain.repository_for(Book).newest())


@book_router.get("/browse", response_model=BookPageResponse)
async def browse_books(
    page: int = 1,
    limit: int = 20,
    title: str | None = None,
    author: str | None = None,
    category: list[str] | None = Query(default=None),
    min_price: float | None = None,
    max_price: float | None = None,
    search: str | None = None,
) -> BookPageResponse:
    result = current_domain.repository_for(Book).browse(
        page=page,
        limit=limit,
        title=title,
        author=author,
        categories=_split(category),
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    return BookPageResponse(
        data=_books(result.items),
        meta=PageMeta(page=result.page, limit=result.limit, total=result.total, total_pages=result.total_pages),
    )


@book_router.get("/featured", response_model=list[BookResponse])
async def featured_books() -> list[BookResponse]:
    return _books(current_domain.repository_for(Book).featured())


@book_router.get("/new", response_model=list[BookResponse])
async def new_books() -> list[BookResponse]:
    return _books(current_domain.repository_for(Book).new_arrivals())


@book_router.get("/search", response_model=list[BookResponse])
async def search_books(q: str | None = None) -> list[BookResponse]:
    if not q or not q.strip():
        raise ValidationError({"q": ["Search term is required"]})
    return _books(current_domain.repository_for(Book).search(q.strip()))


@book_router.get("/category/{category}", response_model=list[BookResponse])
async def books_in_category(category: str) -> list[BookResponse]:
    return _books(current_domain.repository_for(Book).in_category(category))


@book_router.get("/{book_id}", response_model=BookDetailResponse)
async def get_book(book_id: str) -> BookDetailResponse:
    book = current_domain.repository_for(Book).get(book_id)
    comments = current_domain.repository_for(Comment).for_book(book.id)
    return BookDetailResponse(
        **BookResponse.model_validate(book).model_dump(),
        comments=[BookCommentResponse.model_validate(c) for c in comments],
    )


@book_router.get("/{book_id}/stock", response_model=StockResponse)
async def get_stock(book_id: str) -> StockResponse:
    book = current_domain.repository_for(Book).get(book_id)
    return StockResponse(book_id=str(book.id), stock=book.stock)


@book_router.get("/{book_id}/comments", response_model=list[BookCommentResponse])
async def get_book_comments(book_id: str) -> list[BookCommentResponse]:
    book = current_domain.repository_for(Book).get(book_id)
    return [BookCommentResponse.model_validate(c) for c in current_domain.repository_for(Comment).for_book(book.id)]


# ---------------------------------------------------------------------------
# Administration
# ---------------------------------------------------------------------------
@book_router.put("/{book_id}/MultiStocks", response_model=StockResponse)
async def decrement_stock(
    book_id: str,
    body: DecrementStockRequest,
    context: AuthContext = Depends(requires(Capability.ADJUST_STOCK)),
) -> StockResponse:
    remaining = current_domain.process(
        DecrementStock(book_id=book_id, quantity=body.quantity),
        asynchronous=False,
    )
    return StockResponse(book_id=book_id, stock=remaining)


@book_router.post("", status_code=201, response_model=BookResponse)
async def create_book(
    body: CreateBookRequest,
    context: AuthContext = Depends(requires(Capability.MANAGE_CATALOGUE)),
) -> BookResponse:
    fields = body.model_dump(exclude={"is_new"})
    book_id = current_domain.process(CreateBook(new_arrival=body.is_new, **fields), asynchronous=False)
    return BookResponse.model_validate(current_domain.repository_for(Book).get(book_id))


@book_router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str,
    body: UpdateBookRequest,
    context: AuthContext = Depends(requires(Capability.MANAGE_CATALOGUE)),
) -> BookResponse:
    changes = body.model_dump(exclude_unset=True, exclude={"is_new"})
    if body.is_new is not None:
        changes["new_arrival"] = body.is_new
    current_domain.process(UpdateBook(book_id=book_id, **changes), asynchronous=False)
    return BookResponse.model_validate(current_domain.repository_for(Book).get(book_id))


@book_router.delete("/{book_id}", response_model=StatusResponse)
async def delete_book(
    book_id: str,
    context: AuthContext = Depends(requires(Capability.MANAGE_CATALOGUE)),
) -> StatusResponse:
    current_domain.process(RemoveBook(book_id=book_id), asynchronous=False)
    return StatusResponse()


@book_router.post("/uploads", status_code=201, response_model=UploadResponse)
async def upload_image(
    image: UploadFile | None = File(default=None),
    context: AuthContext = Depends(requires(Capability.MANAGE_CATALOGUE)),
) -> UploadResponse:
    if image is None or not image.filename:
        raise ValidationError({"image": ["No file uploaded"]})
    if image.content_type and not image.content_type.startswith("image/"):
        raise ValidationError({"image": [f"Unsupported file type {image.content_type}"]})

    target_dir = upload_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    name = f"{uuid4().hex}{Path(image.filename).suffix.lower()}"
    with (target_dir / name).open("wb") as out:
        shutil.copyfileobj(image.file, out)

    logger.info("Book image uploaded", file=name, uploaded_by=context.user_id)
    return UploadResponse(image=f"/uploads/{name}")
