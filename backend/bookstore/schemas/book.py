"""Book Pydantic schemas."""
from pydantic import BaseModel, ConfigDict, Field

from bookstore.models.book import Genre
from bookstore.schemas.common import BaseSchema


class BookCreate(BaseModel):
    """Schema for creating a book.

    Only shape and types are checked here; the catalog rules (unique
    title, year range, positive price) are enforced by the service so
    that they report the catalog's own error messages.
    """

    title: str = Field(..., min_length=1)
    author: str
    year: int
    price: int
    genres: list[Genre] = []

    model_config = ConfigDict(extra="ignore")


class BookResponse(BaseSchema):
    """Schema for book response."""

    id: int
    title: str
    author: str
    year: int
    price: int
    genres: list[Genre]
