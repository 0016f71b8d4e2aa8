"""Domain models."""
from bookstore.models.book import MAX_YEAR, MIN_YEAR, VALID_GENRES, Book, Genre

__all__ = [
    "Book",
    "Genre",
    "MAX_YEAR",
    "MIN_YEAR",
    "VALID_GENRES",
]
