"""
Bookshelf API: Greeting Route
==============================

GET /hello/{name} answers with a greeting that embeds the path suffix
verbatim: no escaping, no validation, and an empty name is allowed.
"""

from fastapi import APIRouter

from bookshelf.schemas.book import TextEnvelope

router = APIRouter(tags=["Greeting"])


@router.get(
    "/hello/{name:path}",
    response_model=TextEnvelope,
    summary="Greet the caller by name",
)
async def hello(name: str) -> TextEnvelope:
    return TextEnvelope.ok(f"Hello {name}! Glad to see you again.")
