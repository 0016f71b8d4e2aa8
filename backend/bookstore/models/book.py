"""Book model."""
from dataclasses import dataclass, field
from enum import Enum as PyEnum

MIN_YEAR = 1940
MAX_YEAR = 2100


class Genre(str, PyEnum):
    """Genre tags a book may carry."""
    SCI_FI = "SCI_FI"
    NOVEL = "NOVEL"
    HISTORY = "HISTORY"
    MANGA = "MANGA"
    ROMANCE = "ROMANCE"
    PROFESSIONAL = "PROFESSIONAL"


VALID_GENRES = frozenset(genre.value for genre in Genre)


@dataclass(frozen=True)
class Book:
    """A single catalog record.

    Records are immutable; a price change replaces the stored record
    with a copy, so snapshots handed out by the store stay stable.
    """

    id: int
    title: str
    author: str
    year: int
    price: int
    genres: tuple[Genre, ...] = field(default_factory=tuple)

    def has_any_genre(self, wanted: frozenset[Genre]) -> bool:
        return any(genre in wanted for genre in self.genres)
