"""Health and metadata routes."""
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from bookstore.schemas.common import InfoResponse

router = APIRouter(tags=["Health"])


@router.get("/books/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Health check endpoint."""
    return "OK"


@router.get("/", response_model=InfoResponse)
async def root(request: Request) -> dict:
    """Root endpoint."""
    settings = request.app.state.settings
    return {"name": settings.app_name, "version": settings.version}
