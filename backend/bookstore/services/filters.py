"""Composable query filters over a snapshot of books."""
import unicodedata
from dataclasses import dataclass
from typing import Callable, Iterable, List, Mapping, Optional, Union

from bookstore.core.exceptions import ErrorKind, Failure
from bookstore.core.utils import parse_int
from bookstore.models.book import VALID_GENRES, Book, Genre

INVALID_GENRE_MESSAGE = "Invalid genre provided"

# Query parameter names accepted by the listing and counting endpoints
AUTHOR_PARAM = "author"
PRICE_AT_LEAST_PARAM = "price-bigger-than"
PRICE_AT_MOST_PARAM = "price-less-than"
YEAR_AT_LEAST_PARAM = "year-bigger-than"
YEAR_AT_MOST_PARAM = "year-less-than"
GENRES_PARAM = "genres"


@dataclass(frozen=True)
class FilterCriteria:
    """Optional query constraints; ``None`` means not supplied.

    ``genres`` keeps the raw requested tags. They are checked against the
    genre enumeration when the filter is evaluated.
    """

    author: Optional[str] = None
    price_at_least: Optional[int] = None
    price_at_most: Optional[int] = None
    year_at_least: Optional[int] = None
    year_at_most: Optional[int] = None
    genres: Optional[tuple[str, ...]] = None

    @classmethod
    def from_query(cls, params: Mapping[str, Optional[str]]) -> "FilterCriteria":
        """Build criteria from raw query parameters.

        Missing, empty and non-integer bounds are dropped rather than read
        as zero; the text ``"0"`` is a real bound.
        """
        author = params.get(AUTHOR_PARAM) or None
        raw_genres = params.get(GENRES_PARAM)
        genres = None
        if raw_genres:
            genres = tuple(raw_genres.split(","))
        return cls(
            author=author,
            price_at_least=parse_int(params.get(PRICE_AT_LEAST_PARAM)),
            price_at_most=parse_int(params.get(PRICE_AT_MOST_PARAM)),
            year_at_least=parse_int(params.get(YEAR_AT_LEAST_PARAM)),
            year_at_most=parse_int(params.get(YEAR_AT_MOST_PARAM)),
            genres=genres,
        )


def _predicates(criteria: FilterCriteria) -> List[Callable[[Book], bool]]:
    checks: List[Callable[[Book], bool]] = []
    if criteria.author is not None:
        author = criteria.author.casefold()
        checks.append(lambda b: b.author.casefold() == author)
    if criteria.price_at_least is not None:
        checks.append(lambda b: b.price >= criteria.price_at_least)
    if criteria.price_at_most is not None:
        checks.append(lambda b: b.price <= criteria.price_at_most)
    if criteria.year_at_least is not None:
        checks.append(lambda b: b.year >= criteria.year_at_least)
    if criteria.year_at_most is not None:
        checks.append(lambda b: b.year <= criteria.year_at_most)
    if criteria.genres is not None:
        wanted = frozenset(Genre(tag) for tag in criteria.genres)
        checks.append(lambda b: b.has_any_genre(wanted))
    return checks


def filter_books(
    books: Iterable[Book],
    criteria: FilterCriteria,
) -> Union[List[Book], Failure]:
    """Return the books matching every supplied criterion.

    An unknown genre tag fails the whole evaluation; no partial result is
    produced.
    """
    if criteria.genres is not None and not all(
        tag in VALID_GENRES for tag in criteria.genres
    ):
        return Failure(ErrorKind.INVALID_GENRE, INVALID_GENRE_MESSAGE)
    checks = _predicates(criteria)
    return [book for book in books if all(check(book) for check in checks)]


def title_sort_key(title: str) -> str:
    """Base-letter comparison key: accents and case are ignored."""
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold()


def list_matching(
    books: Iterable[Book],
    criteria: FilterCriteria,
) -> Union[List[Book], Failure]:
    """Filter, then sort by title ascending."""
    matched = filter_books(books, criteria)
    if isinstance(matched, Failure):
        return matched
    return sorted(matched, key=lambda b: title_sort_key(b.title))


def count_matching(
    books: Iterable[Book],
    criteria: FilterCriteria,
) -> Union[int, Failure]:
    matched = filter_books(books, criteria)
    if isinstance(matched, Failure):
        return matched
    return len(matched)
