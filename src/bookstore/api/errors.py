"""Translate domain errors into HTTP responses.

Protean's handlers cover `ValidationError` (400) and `ObjectNotFoundError`
(404). The handlers below add the bookstore's own error types and a last-resort
500 that logs the failure.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from bookstore.errors import DuplicateEmail, Forbidden, InsufficientStock, InvalidSession, Unauthenticated
from bookstore.identity.session import COOKIE_NAME

logger = structlog.get_logger(__name__)


async def _unauthenticated(request: Request, exc: Unauthenticated):
    response = JSONResponse(status_code=401, content={"error": exc.message})
    if isinstance(exc, InvalidSession):
        response.delete_cookie(COOKIE_NAME)
    return response


async def _forbidden(request: Request, exc: Forbidden):
    return JSONResponse(status_code=403, content={"error": exc.message})


async def _duplicate_email(request: Request, exc: DuplicateEmail):
    return JSONResponse(status_code=409, content={"error": str(exc)})


async def _insufficient_stock(request: Request, exc: InsufficientStock):
    return JSONResponse(
        status_code=400,
        content={
            "error": exc.messages,
            "book_id": exc.book_id,
            "available": exc.available,
            "requested": exc.requested,
        },
    )


async def _unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error", method=request.method, path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(Unauthenticated, _unauthenticated)
    app.add_exception_handler(Forbidden, _forbidden)
    app.add_exception_handler(DuplicateEmail, _duplicate_email)
    app.add_exception_handler(InsufficientStock, _insufficient_stock)
    app.add_exception_handler(Exception, _unexpected)
