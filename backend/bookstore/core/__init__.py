"""Core utilities."""
from bookstore.core.exceptions import (
    STATUS_BY_KIND,
    AppException,
    CatalogError,
    ErrorKind,
    Failure,
)
from bookstore.core.logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "AppException",
    "CatalogError",
    "ErrorKind",
    "Failure",
    "STATUS_BY_KIND",
    # Logging
    "get_logger",
    "setup_logging",
]
