"""FastAPI dependencies wiring settings, repository and service."""
import asyncpg
from fastapi import Depends, Request

from bookstock.config import Settings
from bookstock.repositories.book_repository import BookRepository
from bookstock.services.book_service import BookService


def get_app_settings(request: Request) -> Settings:
    """The Settings instance the app was built with."""
    return request.app.state.settings


def get_pool(request: Request) -> asyncpg.pool.Pool:
    return request.app.state.pool


def get_book_repository(
    pool: asyncpg.pool.Pool = Depends(get_pool),
    settings: Settings = Depends(get_app_settings),
) -> BookRepository:
    return BookRepository(pool, query_timeout=settings.db_query_timeout)


def get_book_service(repository: BookRepository = Depends(get_book_repository)) -> BookService:
    return BookService(repository)
