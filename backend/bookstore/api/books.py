"""Book API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from bookstore.api.deps import get_book_service, get_filter_criteria
from bookstore.schemas.book import BookCreate, BookResponse
from bookstore.schemas.common import ErrorResponse, ResultResponse
from bookstore.services.book_service import BookService
from bookstore.services.filters import FilterCriteria

router = APIRouter(tags=["Books"])

REJECTED = {409: {"model": ErrorResponse, "description": "Catalog rule violated."}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "No such book."}}
BAD_FILTER = {400: {"model": ErrorResponse, "description": "Invalid genre provided."}}


@router.post("/book", response_model=ResultResponse[int], responses=REJECTED)
async def create_book(
    book: BookCreate,
    service: BookService = Depends(get_book_service),
) -> dict:
    """Create a book and return its new id."""
    book_id = service.create_book(
        title=book.title,
        author=book.author,
        year=book.year,
        price=book.price,
        genres=book.genres,
    )
    return {"result": book_id}


@router.get("/books/total", response_model=ResultResponse[int], responses=BAD_FILTER)
async def count_books(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    service: BookService = Depends(get_book_service),
) -> dict:
    """Count books matching the optional filters."""
    return {"result": service.count_books(criteria)}


@router.get(
    "/books",
    response_model=ResultResponse[list[BookResponse]],
    responses=BAD_FILTER,
)
async def list_books(
    criteria: FilterCriteria = Depends(get_filter_criteria),
    service: BookService = Depends(get_book_service),
) -> dict:
    """List books matching the optional filters, sorted by title."""
    books = service.list_books(criteria)
    return {"result": [BookResponse.model_validate(b) for b in books]}


@router.get("/book", response_model=ResultResponse[BookResponse], responses=NOT_FOUND)
async def get_book(
    book_id: Optional[str] = Query(None, alias="id"),
    service: BookService = Depends(get_book_service),
) -> dict:
    """Get a single book by id."""
    book = service.get_book(book_id)
    return {"result": BookResponse.model_validate(book)}


@router.put(
    "/book",
    response_model=ResultResponse[int],
    responses={**NOT_FOUND, **REJECTED},
)
async def update_price(
    book_id: Optional[str] = Query(None, alias="id"),
    price: Optional[str] = Query(None),
    service: BookService = Depends(get_book_service),
) -> dict:
    """Set a new price and return the previous one."""
    return {"result": service.update_price(book_id, price)}


@router.delete("/book", response_model=ResultResponse[int], responses=NOT_FOUND)
async def delete_book(
    book_id: Optional[str] = Query(None, alias="id"),
    service: BookService = Depends(get_book_service),
) -> dict:
    """Delete a book and return the number of books left."""
    return {"result": service.delete_book(book_id)}
