"""Response envelopes shared by every endpoint."""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    data: T


class PaginationMeta(BaseModel):
    offset: int = Field(..., examples=[0])
    limit: int = Field(..., examples=[10])
    total: int = Field(..., examples=[100])


class PaginationLinks(BaseModel):
    self: str = Field(..., examples=["/api/v1/books?offset=0&limit=10"])
    first: str = Field(..., examples=["/api/v1/books?offset=0&limit=10"])
    last: str = Field(..., examples=["/api/v1/books?offset=90&limit=10"])
    next: Optional[str] = Field(None, examples=["/api/v1/books?offset=10&limit=10"])
    prev: Optional[str] = Field(None, examples=["/api/v1/books?offset=0&limit=10"])


class PaginatedResponse(BaseModel, Generic[T]):
    data: List[T]
    meta: PaginationMeta
    links: PaginationLinks


class HTTPError(BaseModel):
    """Uniform error envelope."""
    code: int = Field(..., examples=[404])
    message: str = Field(..., examples=["Book not found"])
    error: str = Field(..., examples=["Not Found"])
    timestamp: str = Field(..., examples=["2025-01-01T00:00:00+00:00"])
    path: str = Field(..., examples=["/api/v1/books/0190d4c6-1b0e-7c3e-9f5e-8f0a1b2c3d4e"])
