"""Business rules guarding catalog mutations.

Validators are pure: they return ``None`` when the input is acceptable
and a :class:`Failure` naming the first broken rule otherwise. Callers
decide how to surface the failure.
"""
from typing import Any, Iterable, Optional

from bookstore.core.exceptions import ErrorKind, Failure
from bookstore.core.utils import parse_int
from bookstore.models.book import MAX_YEAR, MIN_YEAR, Book
from bookstore.storage import BookStore


def title_taken(title: str, existing: Iterable[Book]) -> bool:
    wanted = title.casefold()
    return any(book.title.casefold() == wanted for book in existing)


def not_found(id: Any) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, f"Error: no such Book with id {id}")


def validate_create(
    title: str,
    year: int,
    price: int,
    existing: Iterable[Book],
) -> Optional[Failure]:
    """Check a new record against the creation rules.

    Rules are evaluated in a fixed order (duplicate title, year range,
    price) so the reported message is deterministic when several fail.
    """
    if title_taken(title, existing):
        return Failure(
            ErrorKind.DUPLICATE_TITLE,
            f"Error: Book with the title [{title}] already exists in the system",
        )
    if year < MIN_YEAR or year > MAX_YEAR:
        return Failure(
            ErrorKind.YEAR_OUT_OF_RANGE,
            f"Error: Can't create new Book that its year [{year}] is not in "
            f"the accepted range [{MIN_YEAR} -> {MAX_YEAR}]",
        )
    if price <= 0:
        return Failure(
            ErrorKind.NON_POSITIVE_PRICE,
            "Error: Can't create new Book with negative price",
        )
    return None


def validate_price_update(id: Any, price: Any, store: BookStore) -> Optional[Failure]:
    """Check that ``id`` exists and ``price`` is a positive integer."""
    if store.find_by_id(id) is None:
        return not_found(id)
    new_price = parse_int(price)
    if new_price is None or new_price <= 0:
        return Failure(
            ErrorKind.NON_POSITIVE_PRICE,
            f"Error: price update for book [{id}] must be a positive integer",
        )
    return None
