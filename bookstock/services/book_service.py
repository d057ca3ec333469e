"""Book business rules.

Every failure leaves this layer as an ``HTTPException`` whose detail is a
fixed, caller-safe message. Storage errors are logged here with their full
cause chain and never forwarded verbatim.
"""
from typing import List, Tuple
from uuid import UUID

from fastapi import HTTPException, status
from uuid_extensions import uuid7

from bookstock.errors import NoRowsError, RepositoryError
from bookstock.models.book_model import Book, CreateBookRequest, UpdateBookRequest
from bookstock.repositories.book_repository import BookRepository
from bookstock.utils.isbn import is_valid_isbn
from bookstock.utils.logger import get_logger

logger = get_logger(__name__)


def _parse_book_id(book_id: str) -> UUID:
    try:
        return UUID(book_id)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid book ID") from exc


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")


def _internal(message: str, exc: Exception) -> HTTPException:
    logger.error("%s: %s", message, exc, exc_info=exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


class BookService:
    def __init__(self, repository: BookRepository):
        self.repository = repository

    async def create(self, request: CreateBookRequest) -> Book:
        """Store a new book under a freshly generated time-ordered id."""
        try:
            book_id = uuid7()
        except Exception as exc:
            raise _internal("Failed to generate book ID", exc) from exc

        book = Book(book_id=book_id, **request.model_dump())
        try:
            stored = await self.repository.create(book)
        except RepositoryError as exc:
            raise _internal("Failed to create book", exc) from exc

        logger.info("Created book %s (isbn=%s)", stored.book_id, stored.isbn)
        return stored

    async def get_by_id(self, book_id: str) -> Book:
        parsed_id = _parse_book_id(book_id)
        try:
            book = await self.repository.get_by_id(parsed_id)
        except NoRowsError as exc:
            raise _not_found() from exc
        except RepositoryError as exc:
            raise _internal("Failed to get book", exc) from exc
        return book

    async def get_by_isbn(self, isbn: str) -> Book:
        if not is_valid_isbn(isbn):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ISBN format")
        try:
            book = await self.repository.get_by_isbn(isbn)
        except NoRowsError as exc:
            raise _not_found() from exc
        except RepositoryError as exc:
            raise _internal("Failed to get book", exc) from exc
        return book

    async def get_many(self, offset: int, limit: int) -> Tuple[List[Book], int]:
        """Return one page of books and the total row count."""
        if limit <= 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Limit must be greater than 0")

        try:
            books = await self.repository.get_many(offset, limit)
        except RepositoryError as exc:
            raise _internal("Failed to get books", exc) from exc

        try:
            total = await self.repository.get_total_count()
        except RepositoryError as exc:
            raise _internal("Failed to get total count", exc) from exc

        return books, total

    async def update(self, request: UpdateBookRequest) -> Book:
        try:
            book = await self.repository.update(request.book_id, request.changes())
        except NoRowsError as exc:
            raise _not_found() from exc
        except RepositoryError as exc:
            raise _internal("Failed to update book", exc) from exc

        logger.info("Updated book %s", book.book_id)
        return book

    async def delete(self, book_id: str) -> None:
        parsed_id = _parse_book_id(book_id)
        try:
            await self.repository.delete(parsed_id)
        except NoRowsError as exc:
            raise _not_found() from exc
        except RepositoryError as exc:
            raise _internal("Failed to delete book", exc) from exc

        logger.info("Deleted book %s", parsed_id)
