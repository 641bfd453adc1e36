"""
Bookshelf API: Test Configuration (conftest.py)
================================================

Fixture Hierarchy (all function-scoped):
    ├── book_store: Empty BookStore owned by the test
    ├── sample_book / other_book: Ready-made Book records
    └── test_client: HTTPX AsyncClient talking to a fresh app built
                     around `book_store`
"""

import os

# Quiet logs before any bookshelf import reads the settings
os.environ.setdefault("BOOKSHELF_LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bookshelf.main import create_app
from bookshelf.schemas.book import Book
from bookshelf.services.book_store import BookStore


@pytest.fixture
def book_store():
    return BookStore()


@pytest.fixture
def sample_book():
    return Book(id="1", name="Dune", author="Herbert")


@pytest.fixture
def other_book():
    return Book(id="2", name="Solaris", author="Lem")


@pytest_asyncio.fixture
async def test_client(book_store):
    """
    Async HTTP client wired straight into the ASGI app (no server needed).

    Usage:
        async def test_hello(test_client):
            response = await test_client.get("/hello/Ann")
            assert response.status_code == 200
    """
    app = create_app(store=book_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
