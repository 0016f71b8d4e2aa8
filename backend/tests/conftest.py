"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.config import Settings
from bookstore.main import create_app
from bookstore.models.book import Genre
from bookstore.services.book_service import BookService
from bookstore.storage import BookStore


@pytest.fixture
def store() -> BookStore:
    """Fresh, empty store."""
    return BookStore()


@pytest.fixture
def service(store: BookStore) -> BookService:
    return BookService(store)


@pytest.fixture
def seeded_store(store: BookStore) -> BookStore:
    """Store with a small mixed catalog (ids 1..4)."""
    store.insert("Dune", "Frank Herbert", 1965, 20, [Genre.SCI_FI, Genre.NOVEL])
    store.insert("akira", "Katsuhiro Otomo", 1982, 15, [Genre.MANGA, Genre.SCI_FI])
    store.insert("Clean Code", "Robert Martin", 2008, 45, [Genre.PROFESSIONAL])
    store.insert("Émile", "Rousseau", 1962, 9, [Genre.HISTORY])
    return store


@pytest.fixture
def app(store: BookStore):
    return create_app(settings=Settings(log_level="WARNING"), store=store)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
