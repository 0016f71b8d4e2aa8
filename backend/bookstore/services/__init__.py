"""Catalog services."""
from bookstore.services.book_service import BookService
from bookstore.services.filters import FilterCriteria

__all__ = [
    "BookService",
    "FilterCriteria",
]
