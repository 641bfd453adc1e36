"""
Bookshelf API: FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires the book store, middleware, exception handlers and
       routers together; run() serves the module-level app with uvicorn.
Who:   uvicorn (`uvicorn bookshelf.main:app`), the `bookshelf` console
       script, and the test suite (which builds a fresh app per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Access Logging │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /hello/{name}│ │ /book/ /books│ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers (all render the envelope):      │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Decode→400 │ Exists→409 │ NotFound→404 │     │   │
    │  │ ChangeRejected→400/404 │ HTTP 404/405 │ 500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.exceptions import (
    AlreadyExistsError,
    ChangeRejectedError,
    DecodeError,
    NotFoundError,
)
from bookshelf.middleware.logging import AccessLogMiddleware
from bookshelf.middleware.request_id import RequestIDFilter, RequestIDMiddleware
from bookshelf.routes import books, greeting, health
from bookshelf.schemas.book import Envelope
from bookshelf.services.book_store import BookStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s
    Output goes to stdout so container runtimes capture it. RequestIDFilter
    sits on the handler so every record, ours or a library's, has a request_id.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # bookshelf.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Bookshelf API %s starting up", __version__)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)

    yield

    # The store is in memory only; its contents are dropped here
    logger.info("Bookshelf API shutting down, discarding %d book(s)", len(app.state.store))


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Envelope.fail(message).to_content(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to envelope responses.

    Handler hierarchy:
        DecodeError             → 400
        AlreadyExistsError      → 409
        NotFoundError           → 404
        ChangeRejectedError     → settings.missing_book_status
        HTTPException           → its own status (unknown path 404, wrong method 405)
        Exception (fallback)    → 500, generic message, traceback logged only
    """

    @app.exception_handler(DecodeError)
    async def handle_decode_error(request: Request, exc: DecodeError):
        logger.warning("Undecodable body: %s", exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(AlreadyExistsError)
    async def handle_already_exists(request: Request, exc: AlreadyExistsError):
        return _error_response(409, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(ChangeRejectedError)
    async def handle_change_rejected(request: Request, exc: ChangeRejectedError):
        return _error_response(settings.missing_book_status, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", exc, exc_info=True)
        return _error_response(500, "An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[BookStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Book store to serve. A new empty store is created when omitted;
               tests pass their own to inspect it directly.
    """
    app = FastAPI(
        title="Bookshelf API",
        description="CRUD over an in-memory collection of book records.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else BookStore()

    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(greeting.router)
    app.include_router(books.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured limits."""
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_keep_alive=settings.idle_timeout,
        h11_max_incomplete_event_size=settings.max_header_bytes,
    )


if __name__ == "__main__":
    run()
