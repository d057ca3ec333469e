"""Book table data access."""
import asyncio
from typing import List
from uuid import UUID

import asyncpg

from bookstock.errors import DatabaseQueryError, NoRowsError
from bookstock.models.book_model import Book

BOOK_CREATE = """
    INSERT INTO book (book_id, isbn, title, author, publisher, published_at, stock)
    VALUES ($1, $2, $3, $4, $5, $6, $7)
    RETURNING *
"""
BOOK_GET_BY_ID = "SELECT * FROM book WHERE book_id = $1 LIMIT 1"
BOOK_GET_BY_ISBN = "SELECT * FROM book WHERE isbn = $1 LIMIT 1"
BOOK_GET_MANY = "SELECT * FROM book ORDER BY book_id OFFSET $1 LIMIT $2"
BOOK_TOTAL_COUNT = "SELECT COUNT(*) FROM book"
# NULL parameters keep the stored value.
BOOK_UPDATE = """
    UPDATE book SET
        isbn = COALESCE($2, isbn),
        title = COALESCE($3, title),
        author = COALESCE($4, author),
        publisher = COALESCE($5, publisher),
        published_at = COALESCE($6, published_at),
        stock = COALESCE($7, stock),
        updated_at = NOW()
    WHERE book_id = $1
    RETURNING *
"""
BOOK_DELETE = "DELETE FROM book WHERE book_id = $1"

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError)


class BookRepository:
    """Issues parameterized statements against the book table."""

    def __init__(self, pool: asyncpg.pool.Pool, query_timeout: float = 10.0):
        self.pool = pool
        self.query_timeout = query_timeout

    async def _fetchrow(self, query: str, *args):
        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchrow(query, *args, timeout=self.query_timeout)
        except _DRIVER_ERRORS as exc:
            raise DatabaseQueryError(str(exc)) from exc

    async def create(self, book: Book) -> Book:
        row = await self._fetchrow(
            BOOK_CREATE,
            book.book_id,
            book.isbn,
            book.title,
            book.author,
            book.publisher,
            book.published_at,
            book.stock,
        )
        if row is None:
            raise DatabaseQueryError("insert returned no row")
        return Book.from_db_record(row)

    async def get_by_id(self, book_id: UUID) -> Book:
        row = await self._fetchrow(BOOK_GET_BY_ID, book_id)
        if row is None:
            raise NoRowsError("book not found")
        return Book.from_db_record(row)

    async def get_by_isbn(self, isbn: str) -> Book:
        row = await self._fetchrow(BOOK_GET_BY_ISBN, isbn)
        if row is None:
            raise NoRowsError("book not found")
        return Book.from_db_record(row)

    async def get_many(self, offset: int, limit: int) -> List[Book]:
        """Books ordered by id; an empty page is not an error."""
        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(BOOK_GET_MANY, offset, limit, timeout=self.query_timeout)
        except _DRIVER_ERRORS as exc:
            raise DatabaseQueryError(str(exc)) from exc
        return [Book.from_db_record(row) for row in rows]

    async def get_total_count(self) -> int:
        try:
            async with self.pool.acquire() as conn:
                total = await conn.fetchval(BOOK_TOTAL_COUNT, timeout=self.query_timeout)
        except _DRIVER_ERRORS as exc:
            raise DatabaseQueryError(str(exc)) from exc
        return int(total or 0)

    async def update(self, book_id: UUID, changes: dict) -> Book:
        """Apply changes; keys that are missing or None are left untouched."""
        row = await self._fetchrow(
            BOOK_UPDATE,
            book_id,
            changes.get("isbn"),
            changes.get("title"),
            changes.get("author"),
            changes.get("publisher"),
            changes.get("published_at"),
            changes.get("stock"),
        )
        if row is None:
            raise NoRowsError("book not found")
        return Book.from_db_record(row)

    async def delete(self, book_id: UUID) -> None:
        try:
            async with self.pool.acquire() as conn:
                status = await conn.execute(BOOK_DELETE, book_id, timeout=self.query_timeout)
        except _DRIVER_ERRORS as exc:
            raise DatabaseQueryError(str(exc)) from exc

        # status looks like "DELETE <n>"
        if int(status.split()[-1]) <= 0:
            raise NoRowsError("book not found")
