"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.api import api_router
from bookstore.config import Settings, get_settings
from bookstore.core.exceptions import CatalogError
from bookstore.core.logging import get_logger, setup_logging
from bookstore.services.book_service import BookService
from bookstore.storage import BookStore

logger = get_logger("main")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errorMessage": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookStore] = None,
) -> FastAPI:
    """Build an application around its own (or the given) book store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        logger.info(f"{settings.app_name} {settings.version} starting")
        yield
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book catalog API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.book_service = BookService(store if store is not None else BookStore())

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(CatalogError)
    async def catalog_exception_handler(request: Request, exc: CatalogError):
        """Map a rejected catalog operation to its status code."""
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed requests."""
        return _error(422, _describe_validation_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        if settings.debug:
            return _error(500, f"{type(exc).__name__}: {exc}")
        return _error(500, "Internal server error")

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
