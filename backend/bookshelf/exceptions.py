"""
Bookshelf API: Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for every failure the API reports.
How:   Each exception carries a human-readable message and an optional
       context dict. Global handlers registered in main.py turn them into
       envelope responses with the matching HTTP status code.
Who:   Raised by the book store and the route handlers.

Exception Hierarchy:
    BookshelfError (base)            → 500 Internal Server Error
    ├── DecodeError                  → 400 Bad Request
    ├── AlreadyExistsError           → 409 Conflict
    ├── NotFoundError                → 404 Not Found
    └── ChangeRejectedError          → settings.missing_book_status (400)

The message text is what clients see in the envelope's "Error" field, so it
is kept identical to the strings the service has always returned.
"""

from typing import Any, Dict, Optional


class BookshelfError(Exception):
    """
    Base exception for all Bookshelf application errors.

    Attributes:
        message:  Client-facing error description (returned in the envelope)
        context:  Extra debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DecodeError(BookshelfError):
    """
    Raised when a request body cannot be decoded into a book.

    HTTP: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Request body could not be decoded",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AlreadyExistsError(BookshelfError):
    """
    Raised when a book is added under an id the store already holds.

    HTTP: 409 Conflict
    """

    def __init__(self, book_id: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["book_id"] = book_id
        super().__init__(message=f"Book with Id:{book_id} is isset!", context=ctx)
        self.book_id = book_id


class NotFoundError(BookshelfError):
    """
    Raised when no book with the requested id exists.

    HTTP: 404 Not Found when reading. Update and delete re-raise it as
    ChangeRejectedError so their status can differ (see below).
    """

    def __init__(self, book_id: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["book_id"] = book_id
        super().__init__(message=f"Book with Id:{book_id} not found!", context=ctx)
        self.book_id = book_id


class ChangeRejectedError(BookshelfError):
    """
    Raised when an update or delete targets a book that does not exist.

    HTTP: settings.missing_book_status, 400 Bad Request unless configured
    to 404. Clients have always received 400 from PUT/DELETE for a missing
    id while GET answers 404; the setting lets deployments unify the two.
    """

    def __init__(
        self,
        message: str,
        book_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if book_id is not None:
            ctx["book_id"] = book_id
        super().__init__(message=message, context=ctx)
        self.book_id = book_id
