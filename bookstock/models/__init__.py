"""Pydantic models for API requests and responses."""
from .book_model import Book, CreateBookRequest, UpdateBookRequest
from .response_model import (
    DataResponse,
    HTTPError,
    PaginatedResponse,
    PaginationLinks,
    PaginationMeta,
)
