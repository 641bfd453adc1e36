"""
Bookshelf API: Health Check Route
==================================

What:  Liveness endpoint for container health checks and load balancers.
How:   The store lives in process memory, so a response at all means the
       service is healthy; the body adds version, book count and uptime.
"""

import time

from fastapi import APIRouter, Depends

from bookshelf import __version__
from bookshelf.dependencies import get_book_store
from bookshelf.schemas.book import HealthResponse
from bookshelf.services.book_store import BookStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: BookStore = Depends(get_book_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        books=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
