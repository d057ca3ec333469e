"""Data-access layer."""
from .book_repository import BookRepository

__all__ = ["BookRepository"]
