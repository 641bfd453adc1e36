"""
Bookshelf API: Request Dependencies
====================================

What:  FastAPI dependencies shared by the route handlers.
How:   create_app() attaches the BookStore to app.state; get_book_store hands
       that same instance to every request, so no store lives at module level.
       read_book / read_book_ref decode the raw request body as JSON whatever
       its Content-Type, so `curl -d '{"id": "1"}'` (form-encoded by default)
       is accepted like any JSON client.

Example usage in a route:
    @router.post("/book/")
    async def add_book(
        book: Book = Depends(read_book),
        store: BookStore = Depends(get_book_store),
    ):
        store.add(book)
"""

from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from bookshelf.exceptions import DecodeError
from bookshelf.schemas.book import Book, BookRef
from bookshelf.services.book_store import BookStore

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the application serving this request."""
    return request.app.state.store


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic's errors into one line, e.g. `id: Field required`."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Request body could not be decoded"


async def _decode_body(request: Request, model: Type[ModelT]) -> ModelT:
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            describe_validation_error(exc),
            context={"errors": exc.error_count(), "content_type": request.headers.get("content-type")},
        ) from exc


async def read_book(request: Request) -> Book:
    """Request body decoded as a full Book."""
    return await _decode_body(request, Book)


async def read_book_ref(request: Request) -> BookRef:
    """Request body decoded as a BookRef; only the id is kept."""
    return await _decode_body(request, BookRef)
