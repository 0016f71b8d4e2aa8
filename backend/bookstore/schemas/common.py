"""Common Pydantic schemas."""
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class ResultResponse(BaseModel, Generic[DataT]):
    """Successful response envelope."""

    result: DataT


class ErrorResponse(BaseModel):
    """Error response schema."""

    errorMessage: str


class InfoResponse(BaseModel):
    """Service metadata."""

    name: str
    version: str
