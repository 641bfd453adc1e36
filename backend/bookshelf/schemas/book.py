"""
Bookshelf API: Pydantic Request/Response Schemas
=================================================

What:  The Book record and the uniform response envelope.
How:   FastAPI validates request bodies against Book/BookRef and serializes
       every response through Envelope, which always emits both keys:

           {"Message": <payload or null>, "Error": "<string>"}

Envelope is generic over its payload so each route declares exactly what
its success variant carries (a greeting string, a Book, a list of Book).
Errors use the same shape with a null Message.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

PayloadT = TypeVar("PayloadT")


# ══════════════════════════════════════════════════════════════════════════
# Domain Records
# ══════════════════════════════════════════════════════════════════════════


class Book(BaseModel):
    """
    A single book record. Identity is the `id` field.

    Only `id` must be present in a request body; absent name/author
    decode to empty strings. Unknown keys are ignored.
    """
    id: str = Field(description="Unique book identifier")
    name: str = Field(default="", description="Book title")
    author: str = Field(default="", description="Book author")


class BookRef(BaseModel):
    """Request body for DELETE /book/: only the id is meaningful."""
    id: str = Field(description="Identifier of the book to delete")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class Envelope(BaseModel, Generic[PayloadT]):
    """
    Uniform response wrapper.

    Exactly one side is populated: `message` on success, `error` on failure.
    Build instances with `Envelope.ok(...)` / `Envelope.fail(...)`.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[PayloadT] = Field(default=None, alias="Message")
    error: str = Field(default="", alias="Error")

    @classmethod
    def ok(cls, payload: PayloadT) -> "Envelope[PayloadT]":
        return cls(message=payload)

    @classmethod
    def fail(cls, error: str) -> "Envelope[None]":
        return cls(error=error)

    def to_content(self) -> dict:
        """JSON-ready dict using the wire key names."""
        return self.model_dump(mode="json", by_alias=True)


BookEnvelope = Envelope[Book]
BookListEnvelope = Envelope[List[Book]]
TextEnvelope = Envelope[str]


class HealthResponse(BaseModel):
    """Health check response for monitoring probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    books: int = Field(description="Number of books currently held")
    uptime_seconds: float = Field(description="Seconds since service started")
