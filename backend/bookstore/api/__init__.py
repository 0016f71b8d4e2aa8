"""API routers."""
from fastapi import APIRouter

from bookstore.api import books, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(books.router)

__all__ = ["api_router"]
