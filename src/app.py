"""Bookstore FastAPI application.

Serves the catalogue, accounts, carts, orders and comments under `/api`, and
uploaded book images under `/uploads`.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml (e.g. "production"
# switches the default database to PostgreSQL).
from bookstore.domain import bookstore  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

bookstore.init()

from bookstore.api import register_error_handlers  # noqa: E402
from bookstore.cart.api import cart_router  # noqa: E402
from bookstore.catalogue.api import book_router  # noqa: E402
from bookstore.catalogue.api.routes import upload_dir  # noqa: E402
from bookstore.identity.api import auth_router, user_router  # noqa: E402
from bookstore.orders.api import order_router  # noqa: E402
from bookstore.reviews.api import comment_router  # noqa: E402

API_PREFIX = "/api"

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Bookstore API",
    description="Online bookstore: catalogue, accounts, carts, orders and comments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[os.environ.get("FRONTEND_URL", "http://localhost:5173")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the bookstore domain context for each request."""
    with bookstore.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
for router in (auth_router, user_router, book_router, cart_router, order_router, comment_router):
    app.include_router(router, prefix=API_PREFIX)

_uploads = upload_dir()
_uploads.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=str(_uploads)), name="uploads")


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domain": bookstore.name,
            "environment": os.environ.get("PROTEAN_ENV", "development"),
        }
    )
