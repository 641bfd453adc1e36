"""
Bookshelf API: Book Store
==========================

What:  In-memory ordered collection of Book records with CRUD operations.
How:   A plain list scanned linearly for every lookup. Insertion order is
       preserved; update replaces an entry in place and delete removes it,
       shifting later entries left.
Who:   Constructed once by create_app() and handed to route handlers
       through the get_book_store dependency.

Invariants:
    - Ids are unique across the collection at all times.
    - A failed add/update/delete leaves the collection untouched.

Concurrency:
    Every operation holds a single threading.Lock, so the store stays
    consistent when handlers run on uvicorn's worker threads as well as
    on the event loop.
"""

import logging
import threading
from typing import Iterable, List, Optional

from bookshelf.exceptions import AlreadyExistsError, NotFoundError
from bookshelf.schemas.book import Book

logger = logging.getLogger(__name__)


class BookStore:
    """
    Ordered, id-unique collection of books.

    Responsibilities:
        - find_by_id(): first match or None
        - list_all(): snapshot of every book in order
        - add(): append, rejecting duplicate ids
        - update(): replace in place, rejecting unknown ids
        - delete(): remove, rejecting unknown ids
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = []
        self._lock = threading.Lock()
        for book in books or ():
            self.add(book)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return the book with `book_id`, or None when absent."""
        with self._lock:
            index = self._index_of(book_id)
            return None if index is None else self._books[index]

    def list_all(self) -> List[Book]:
        """Return a shallow copy of every book in insertion order."""
        with self._lock:
            return list(self._books)

    def add(self, book: Book) -> None:
        """
        Append `book` to the end of the collection.

        Raises:
            AlreadyExistsError: a book with the same id is already stored
        """
        with self._lock:
            if self._index_of(book.id) is not None:
                raise AlreadyExistsError(book.id)
            self._books.append(book)
        logger.debug("Added book %s", book.id)

    def update(self, book: Book) -> None:
        """
        Replace the stored book that shares `book.id`, keeping its position.

        Raises:
            NotFoundError: no book with that id is stored
        """
        with self._lock:
            index = self._index_of(book.id)
            if index is None:
                raise NotFoundError(book.id)
            self._books[index] = book
        logger.debug("Updated book %s at position %d", book.id, index)

    def delete(self, book_id: str) -> None:
        """
        Remove the book with `book_id`.

        Raises:
            NotFoundError: no book with that id is stored
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                raise NotFoundError(book_id)
            del self._books[index]
        logger.debug("Deleted book %s", book_id)
