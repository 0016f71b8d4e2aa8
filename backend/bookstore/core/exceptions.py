"""Error kinds and exceptions for the catalog."""
from dataclasses import dataclass
from enum import Enum as PyEnum
from typing import Optional


class ErrorKind(str, PyEnum):
    """Expected, recoverable outcomes of catalog validation."""
    DUPLICATE_TITLE = "duplicate_title"
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    NON_POSITIVE_PRICE = "non_positive_price"
    NOT_FOUND = "not_found"
    INVALID_GENRE = "invalid_genre"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_TITLE: 409,
    ErrorKind.YEAR_OUT_OF_RANGE: 409,
    ErrorKind.NON_POSITIVE_PRICE: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_GENRE: 400,
}


@dataclass(frozen=True)
class Failure:
    """A named validation failure returned by the engine."""

    kind: ErrorKind
    message: str


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class CatalogError(AppException):
    """A catalog operation was rejected."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message, error_code=kind.value)
        self.kind = kind

    @classmethod
    def from_failure(cls, failure: Failure) -> "CatalogError":
        return cls(failure.kind, failure.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]
