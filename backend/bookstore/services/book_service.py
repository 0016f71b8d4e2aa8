"""Book service for catalog operations."""
from typing import Any, Iterable, List

from bookstore.core.exceptions import CatalogError, Failure
from bookstore.core.logging import get_logger
from bookstore.core.utils import parse_int
from bookstore.models.book import Book, Genre
from bookstore.services.filters import FilterCriteria, count_matching, list_matching
from bookstore.services.validation import (
    not_found,
    validate_create,
    validate_price_update,
)
from bookstore.storage import BookStore

logger = get_logger("services.books")


def _rejected(failure: Failure) -> CatalogError:
    logger.warning(f"Rejected ({failure.kind.value}): {failure.message}")
    return CatalogError.from_failure(failure)


class BookService:
    """Service for book business logic."""

    def __init__(self, store: BookStore):
        self._store = store

    @property
    def store(self) -> BookStore:
        return self._store

    def create_book(
        self,
        title: str,
        author: str,
        year: int,
        price: int,
        genres: Iterable[Genre] = (),
    ) -> int:
        """Validate and insert a new book, returning its id."""
        with self._store.lock:
            failure = validate_create(title, year, price, self._store.all())
            if failure:
                raise _rejected(failure)
            book_id = self._store.insert(title, author, year, price, genres)
        logger.info(f"Created book {book_id}: {title!r}")
        return book_id

    def count_books(self, criteria: FilterCriteria) -> int:
        """Count books matching the criteria."""
        result = count_matching(self._store.all(), criteria)
        if isinstance(result, Failure):
            raise _rejected(result)
        return result

    def list_books(self, criteria: FilterCriteria) -> List[Book]:
        """List books matching the criteria, sorted by title."""
        result = list_matching(self._store.all(), criteria)
        if isinstance(result, Failure):
            raise _rejected(result)
        return result

    def get_book(self, book_id: Any) -> Book:
        """Retrieve a book by ID."""
        book = self._store.find_by_id(book_id)
        if book is None:
            raise _rejected(not_found(book_id))
        return book

    def update_price(self, book_id: Any, price: Any) -> int:
        """Replace a book's price and return the previous one."""
        with self._store.lock:
            failure = validate_price_update(book_id, price, self._store)
            if failure:
                raise _rejected(failure)
            new_price = parse_int(price)
            old_price = self._store.replace_price(book_id, new_price)
        logger.info(f"Book {book_id} price changed {old_price} -> {new_price}")
        return old_price

    def delete_book(self, book_id: Any) -> int:
        """Delete a book by ID and return how many books remain."""
        with self._store.lock:
            if not self._store.remove_by_id(book_id):
                raise _rejected(not_found(book_id))
            remaining = self._store.count()
        logger.info(f"Deleted book {book_id}, {remaining} remaining")
        return remaining
