"""Book endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from bookstock.models.book_model import MAX_BIGINT, Book, CreateBookRequest, UpdateBookRequest
from bookstock.models.response_model import DataResponse, HTTPError, PaginatedResponse
from bookstock.services.book_service import BookService
from bookstock.utils.dependencies import get_book_service
from bookstock.utils.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    build_pagination_links,
    build_pagination_meta,
)

router = APIRouter()

_ERRORS = {
    400: {"model": HTTPError, "description": "Invalid request"},
    404: {"model": HTTPError, "description": "Book not found"},
    500: {"model": HTTPError, "description": "Internal server error"},
}


@router.post(
    "",
    response_model=DataResponse[Book],
    status_code=status.HTTP_201_CREATED,
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
)
async def create_book(payload: CreateBookRequest, service: BookService = Depends(get_book_service)):
    """Create a new book with the provided information."""
    book = await service.create(payload)
    return DataResponse[Book](data=book)


@router.get(
    "",
    response_model=PaginatedResponse[Book],
    response_model_exclude_none=True,
    responses={400: _ERRORS[400], 500: _ERRORS[500]},
)
async def list_books(
    request: Request,
    offset: int = Query(0, le=MAX_BIGINT, description="Number of books to skip; negative values are treated as 0"),
    limit: int = Query(DEFAULT_LIMIT, description=f"Page size (default {DEFAULT_LIMIT}, max {MAX_LIMIT})"),
    service: BookService = Depends(get_book_service),
):
    """List books with pagination metadata and navigation links."""
    if limit <= 0:
        limit = DEFAULT_LIMIT
    if offset < 0:
        offset = 0
    if limit > MAX_LIMIT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Maximum limit is {MAX_LIMIT}")

    books, total = await service.get_many(offset, limit)

    base_url = str(request.base_url).rstrip("/") + request.url.path
    return PaginatedResponse[Book](
        data=books,
        meta=build_pagination_meta(offset, limit, total),
        links=build_pagination_links(base_url, offset, limit, total),
    )


@router.get("/isbn/{isbn}", response_model=DataResponse[Book], responses=_ERRORS)
async def get_book_by_isbn(isbn: str, service: BookService = Depends(get_book_service)):
    """Get a book by its ISBN."""
    book = await service.get_by_isbn(isbn)
    return DataResponse[Book](data=book)


@router.get("/{book_id}", response_model=DataResponse[Book], responses=_ERRORS)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)):
    """Get a book by its ID."""
    book = await service.get_by_id(book_id)
    return DataResponse[Book](data=book)


@router.patch("", response_model=DataResponse[Book], responses=_ERRORS)
async def update_book(payload: UpdateBookRequest, service: BookService = Depends(get_book_service)):
    """Update a book partially.

    Omitted or null fields keep their stored value; ``stock: -1`` is also
    read as "leave stock unchanged".
    """
    book = await service.update(payload)
    return DataResponse[Book](data=book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
)
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    """Delete a book by its ID."""
    await service.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
