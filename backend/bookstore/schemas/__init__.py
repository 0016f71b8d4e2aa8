"""Pydantic schemas for the HTTP layer."""
from bookstore.schemas.book import BookCreate, BookResponse
from bookstore.schemas.common import BaseSchema, ErrorResponse, InfoResponse, ResultResponse

__all__ = [
    "BaseSchema",
    "BookCreate",
    "BookResponse",
    "ErrorResponse",
    "InfoResponse",
    "ResultResponse",
]
