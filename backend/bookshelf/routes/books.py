"""
Bookshelf API: Book Route Handlers
===================================

What:  CRUD over the in-memory book store.
How:   Request bodies are decoded from raw bytes into Book/BookRef; store
       errors propagate as application exceptions and the global handlers
       in main.py render them as envelopes.

Route Inventory:
    GET    /book/{id}   → 200 Book          | 404 not found
    POST   /book/       → 200 confirmation  | 400 bad body | 409 duplicate id
    PUT    /book/       → 200 confirmation  | 400 bad body | 400* unknown id
    DELETE /book/       → 200 confirmation  | 400 bad body | 400* unknown id
    any    /books/      → 200 full list

    * settings.missing_book_status; set it to 404 to match GET.
"""

from fastapi import APIRouter, Depends

from bookshelf.dependencies import get_book_store, read_book, read_book_ref
from bookshelf.exceptions import ChangeRejectedError, NotFoundError
from bookshelf.schemas.book import (
    Book,
    BookEnvelope,
    BookListEnvelope,
    BookRef,
    TextEnvelope,
)
from bookshelf.services.book_store import BookStore

router = APIRouter(tags=["Books"])

# Methods accepted by /books/; the listing ignores which one was used
LIST_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.get(
    "/book/{book_id:path}",
    response_model=BookEnvelope,
    responses={404: {"description": "Book not found", "model": TextEnvelope}},
    summary="Get a single book by id",
)
async def get_book(
    book_id: str,
    store: BookStore = Depends(get_book_store),
) -> BookEnvelope:
    book = store.find_by_id(book_id)
    if book is None:
        raise NotFoundError(book_id)
    return BookEnvelope.ok(book)


@router.post(
    "/book/",
    response_model=TextEnvelope,
    responses={
        400: {"description": "Body could not be decoded", "model": TextEnvelope},
        409: {"description": "Book id already stored", "model": TextEnvelope},
    },
    summary="Add a book",
)
async def add_book(
    book: Book = Depends(read_book),
    store: BookStore = Depends(get_book_store),
) -> TextEnvelope:
    store.add(book)
    return TextEnvelope.ok(f"Book with id:{book.id} added is SUCCESS!")


@router.put(
    "/book/",
    response_model=TextEnvelope,
    responses={400: {"description": "Bad body or unknown id", "model": TextEnvelope}},
    summary="Replace a stored book",
)
async def update_book(
    book: Book = Depends(read_book),
    store: BookStore = Depends(get_book_store),
) -> TextEnvelope:
    try:
        store.update(book)
    except NotFoundError as exc:
        raise ChangeRejectedError(exc.message, book_id=exc.book_id) from exc
    return TextEnvelope.ok(f"Book with id:{book.id} updated is SUCCESS!")


@router.delete(
    "/book/",
    response_model=TextEnvelope,
    responses={400: {"description": "Bad body or unknown id", "model": TextEnvelope}},
    summary="Delete a book by id",
)
async def delete_book(
    ref: BookRef = Depends(read_book_ref),
    store: BookStore = Depends(get_book_store),
) -> TextEnvelope:
    try:
        store.delete(ref.id)
    except NotFoundError as exc:
        raise ChangeRejectedError(exc.message, book_id=exc.book_id) from exc
    return TextEnvelope.ok(f"Book with id:{ref.id} deleted is SUCCESS!")


@router.api_route(
    "/books/{rest:path}",
    methods=LIST_METHODS,
    response_model=BookListEnvelope,
    summary="List every book",
    description=(
        "Returns the full list in insertion order. The HTTP method is not "
        "checked: POST, PUT, PATCH and DELETE answer exactly like GET and "
        "never modify the store."
    ),
)
async def list_books(
    rest: str,
    store: BookStore = Depends(get_book_store),
) -> BookListEnvelope:
    return BookListEnvelope.ok(store.list_all())
