"""
Bookshelf API: Book Store Unit Tests
=====================================

What we test:
    ✅ add then find_by_id returns the same book
    ✅ duplicate add fails and leaves the store unchanged
    ✅ update/delete of an unknown id fail and leave the store unchanged
    ✅ update keeps position, delete shifts later entries
    ✅ concurrent adds from many threads lose nothing
"""

import threading

import pytest

from bookshelf.exceptions import AlreadyExistsError, NotFoundError
from bookshelf.schemas.book import Book
from bookshelf.services.book_store import BookStore


def _books(*ids):
    return [Book(id=book_id, name=f"Name {book_id}", author=f"Author {book_id}") for book_id in ids]


class TestBookStoreAdd:
    """Tests for add and find_by_id."""

    def setup_method(self):
        self.store = BookStore()

    def test_add_then_find(self):
        book = Book(id="1", name="Dune", author="Herbert")
        self.store.add(book)

        assert self.store.find_by_id("1") == book
        assert len(self.store) == 1

    def test_find_missing_returns_none(self):
        assert self.store.find_by_id("nope") is None

    def test_add_duplicate_raises_and_keeps_size(self):
        self.store.add(Book(id="1", name="Dune", author="Herbert"))

        with pytest.raises(AlreadyExistsError) as exc_info:
            self.store.add(Book(id="1", name="Other", author="Someone"))

        assert exc_info.value.message == "Book with Id:1 is isset!"
        assert len(self.store) == 1
        assert self.store.find_by_id("1").name == "Dune"

    def test_list_all_preserves_insertion_order(self):
        for book in _books("b", "a", "c"):
            self.store.add(book)

        assert [book.id for book in self.store.list_all()] == ["b", "a", "c"]

    def test_list_all_returns_a_copy(self):
        self.store.add(Book(id="1"))

        listed = self.store.list_all()
        listed.clear()

        assert len(self.store) == 1

    def test_initial_books_are_loaded_in_order(self):
        store = BookStore(_books("x", "y"))
        assert [book.id for book in store.list_all()] == ["x", "y"]

    def test_initial_books_with_duplicate_ids_rejected(self):
        with pytest.raises(AlreadyExistsError):
            BookStore(_books("x", "x"))


class TestBookStoreUpdate:
    """Tests for update."""

    def setup_method(self):
        self.store = BookStore(_books("1", "2", "3"))

    def test_update_replaces_in_place(self):
        self.store.update(Book(id="2", name="New", author="Writer"))

        books = self.store.list_all()
        assert [book.id for book in books] == ["1", "2", "3"]
        assert books[1].name == "New"
        assert books[1].author == "Writer"

    def test_update_missing_raises_and_leaves_store(self):
        before = self.store.list_all()

        with pytest.raises(NotFoundError) as exc_info:
            self.store.update(Book(id="9", name="Ghost"))

        assert exc_info.value.message == "Book with Id:9 not found!"
        assert self.store.list_all() == before


class TestBookStoreDelete:
    """Tests for delete."""

    def setup_method(self):
        self.store = BookStore(_books("1", "2", "3"))

    def test_delete_removes_exactly_one(self):
        self.store.delete("2")

        assert len(self.store) == 2
        assert self.store.find_by_id("2") is None
        assert [book.id for book in self.store.list_all()] == ["1", "3"]

    def test_delete_missing_raises_and_leaves_store(self):
        with pytest.raises(NotFoundError) as exc_info:
            self.store.delete("9")

        assert exc_info.value.book_id == "9"
        assert len(self.store) == 3

    def test_deleted_id_can_be_added_again(self):
        self.store.delete("1")
        self.store.add(Book(id="1", name="Back"))

        assert [book.id for book in self.store.list_all()] == ["2", "3", "1"]


class TestBookStoreConcurrency:
    """The lock keeps concurrent writers from losing entries."""

    def test_parallel_adds_are_all_kept(self):
        store = BookStore()
        workers = 8
        per_worker = 200

        def add_range(worker: int) -> None:
            for n in range(per_worker):
                store.add(Book(id=f"{worker}-{n}"))

        threads = [threading.Thread(target=add_range, args=(w,)) for w in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == workers * per_worker
        assert len({book.id for book in store.list_all()}) == workers * per_worker
