"""FastAPI dependencies for the catalog routes."""
from typing import Optional

from fastapi import Query, Request

from bookstore.services.book_service import BookService
from bookstore.services.filters import (
    AUTHOR_PARAM,
    GENRES_PARAM,
    PRICE_AT_LEAST_PARAM,
    PRICE_AT_MOST_PARAM,
    YEAR_AT_LEAST_PARAM,
    YEAR_AT_MOST_PARAM,
    FilterCriteria,
)


def get_book_service(request: Request) -> BookService:
    """Dependency provider for the app's BookService."""
    return request.app.state.book_service


def get_filter_criteria(
    author: Optional[str] = Query(None, alias=AUTHOR_PARAM),
    price_at_least: Optional[str] = Query(None, alias=PRICE_AT_LEAST_PARAM),
    price_at_most: Optional[str] = Query(None, alias=PRICE_AT_MOST_PARAM),
    year_at_least: Optional[str] = Query(None, alias=YEAR_AT_LEAST_PARAM),
    year_at_most: Optional[str] = Query(None, alias=YEAR_AT_MOST_PARAM),
    genres: Optional[str] = Query(None, alias=GENRES_PARAM),
) -> FilterCriteria:
    """Collect the optional filter parameters.

    Values are taken as text so that a malformed bound is dropped instead
    of rejecting the request.
    """
    return FilterCriteria.from_query(
        {
            AUTHOR_PARAM: author,
            PRICE_AT_LEAST_PARAM: price_at_least,
            PRICE_AT_MOST_PARAM: price_at_most,
            YEAR_AT_LEAST_PARAM: year_at_least,
            YEAR_AT_MOST_PARAM: year_at_most,
            GENRES_PARAM: genres,
        }
    )
