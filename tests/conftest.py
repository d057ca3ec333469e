"""Shared fixtures: an in-memory repository and an app wired to it."""
import os
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from uuid import UUID

# bookstock.main builds its module-level app from the environment.
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_USER", "bookstock")
os.environ.setdefault("DB_NAME", "bookstock_test")

import pytest
from fastapi.testclient import TestClient

from bookstock.config import Settings
from bookstock.errors import DatabaseQueryError, NoRowsError
from bookstock.main import create_app
from bookstock.models.book_model import Book
from bookstock.services.book_service import BookService
from bookstock.utils.dependencies import get_book_service


class InMemoryBookRepository:
    """Stands in for BookRepository with the same error contract."""

    def __init__(self):
        self.rows: Dict[UUID, Book] = {}
        self.fail_with: Optional[Exception] = None
        self.fail_count_with: Optional[Exception] = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def create(self, book: Book) -> Book:
        self._check()
        if any(existing.isbn == book.isbn for existing in self.rows.values()):
            raise DatabaseQueryError('duplicate key value violates unique constraint "book_isbn_key"')
        now = datetime.now(timezone.utc)
        stored = book.model_copy(update={"created_at": now, "updated_at": now})
        self.rows[stored.book_id] = stored
        return stored

    async def get_by_id(self, book_id: UUID) -> Book:
        self._check()
        if book_id not in self.rows:
            raise NoRowsError("book not found")
        return self.rows[book_id]

    async def get_by_isbn(self, isbn: str) -> Book:
        self._check()
        for book in self.rows.values():
            if book.isbn == isbn:
                return book
        raise NoRowsError("book not found")

    async def get_many(self, offset: int, limit: int) -> List[Book]:
        self._check()
        ordered = sorted(self.rows.values(), key=lambda book: book.book_id)
        return ordered[offset:offset + limit]

    async def get_total_count(self) -> int:
        self._check()
        if self.fail_count_with is not None:
            raise self.fail_count_with
        return len(self.rows)

    async def update(self, book_id: UUID, changes: dict) -> Book:
        self._check()
        if book_id not in self.rows:
            raise NoRowsError("book not found")
        current = self.rows[book_id]
        updates = {key: value for key, value in changes.items() if value is not None}
        updates["updated_at"] = max(datetime.now(timezone.utc), current.updated_at + timedelta(microseconds=1))
        updated = current.model_copy(update=updates)
        self.rows[book_id] = updated
        return updated

    async def delete(self, book_id: UUID) -> None:
        self._check()
        if self.rows.pop(book_id, None) is None:
            raise NoRowsError("book not found")


@pytest.fixture
def settings():
    return Settings(
        db_host="localhost",
        db_user="bookstock",
        db_name="bookstock_test",
        app_env="test",
        app_version="1.2.3",
    )


@pytest.fixture
def repository():
    return InMemoryBookRepository()


@pytest.fixture
def service(repository):
    return BookService(repository)


@pytest.fixture
def app(settings, service):
    application = create_app(settings)
    application.dependency_overrides[get_book_service] = lambda: service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient without lifespan, so no database is contacted."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def hujan_payload():
    return {
        "isbn": "9783161484100",
        "title": "Hujan",
        "author": "Tere Liye",
        "publisher": "Gramedia",
        "published_at": "2016-01-28",
        "stock": 200,
    }
