"""Book models."""
from datetime import date, datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, Field, field_validator

from bookstock.utils.isbn import is_valid_isbn

# Upper bound of the BIGINT stock column.
MAX_BIGINT = 2**63 - 1

# Legacy clients send stock=-1 to mean "leave stock unchanged".
STOCK_UNCHANGED = -1


def _check_isbn(value: str) -> str:
    if not is_valid_isbn(value):
        raise ValueError("must be a valid ISBN-10 or ISBN-13")
    return value


def _check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


IsbnStr = Annotated[str, AfterValidator(_check_isbn)]
NonBlankStr = Annotated[str, Field(min_length=1), AfterValidator(_check_not_blank)]


class Book(BaseModel):
    """A row of the book table, also returned as-is by the API."""
    book_id: UUID
    isbn: str
    title: str
    author: str
    publisher: str
    published_at: date
    stock: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_db_record(cls, record) -> "Book":
        """Create Book from an asyncpg record."""
        return cls.model_validate(dict(record))


class CreateBookRequest(BaseModel):
    isbn: IsbnStr = Field(..., examples=["9783161484100"])
    title: NonBlankStr = Field(..., examples=["Hujan"])
    author: NonBlankStr = Field(..., examples=["Tere Liye"])
    publisher: NonBlankStr = Field(..., examples=["Gramedia"])
    published_at: date = Field(..., examples=["2016-01-28"])
    stock: int = Field(..., ge=0, le=MAX_BIGINT, examples=[200])


class UpdateBookRequest(BaseModel):
    """Partial update: fields left out (or null) keep their stored value."""
    book_id: UUID
    isbn: Optional[IsbnStr] = None
    title: Optional[NonBlankStr] = None
    author: Optional[NonBlankStr] = None
    publisher: Optional[NonBlankStr] = None
    published_at: Optional[date] = None
    stock: Optional[int] = Field(
        None,
        le=MAX_BIGINT,
        description="New stock level. -1 is accepted as an alias for 'unchanged'.",
    )

    @field_validator("stock")
    @classmethod
    def validate_stock(cls, v: Optional[int]) -> Optional[int]:
        if v == STOCK_UNCHANGED:
            return None
        if v is not None and v < 0:
            raise ValueError("stock must be greater than or equal to 0")
        return v

    def changes(self) -> dict:
        """Updatable fields, with None standing for 'unchanged'."""
        return self.model_dump(exclude={"book_id"})

