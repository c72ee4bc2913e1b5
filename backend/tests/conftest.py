"""
Selerara Dashboard API — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: AsyncMock standing in for AsyncSession (no real DB)
    ├── make_result:     Builds a fake query result from a list of row dicts
    ├── faq_rows / menu_rows: Joined rows as the database returns them
    ├── fake_database:   Stand-in for the app-owned Database (ping/dispose)
    └── test_client:     HTTPX AsyncClient wired to a fresh app instance
"""

import os
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any selerara_api import so that the
# module-level Settings() never points at a real MySQL server
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_PREFIX"] = "/api"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value = make_result([{"id": 1}])
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def make_result():
    """Returns a factory: rows -> object answering .mappings().all() like a Result."""

    def _make(rows):
        result = MagicMock()
        result.mappings.return_value.all.return_value = rows
        return result

    return _make


@pytest.fixture
def faq_rows():
    """FAQ rows in the shape of the faq JOIN category_faq query."""
    return [
        {"id": 1, "title": "Apakah bisa reservasi?", "text": "Bisa, via WhatsApp.",
         "category_id": 1, "category_name": "Reservasi"},
        {"id": 2, "title": "Metode pembayaran?", "text": "Tunai dan QRIS.",
         "category_id": 2, "category_name": "Pembayaran"},
        {"id": 3, "title": "Minimal orang?", "text": "Minimal 4 orang.",
         "category_id": 1, "category_name": "Reservasi"},
    ]


@pytest.fixture
def menu_rows():
    """
    Rows in the shape of the menu_category LEFT JOIN menu_item query.

    Category 1 has two dishes, category 2 has none (id is None),
    category 3 has one dish with every optional column NULL.
    """
    base = {"title": None, "image": None, "price": None, "item_description": None,
            "badge": None, "rating": None, "currency": None}
    return [
        {**base, "category_id": 1, "category_name": "Makanan Utama",
         "category_slug": "makanan-utama", "category_description": "Hidangan khas Sunda",
         "id": 10, "title": "Nasi Timbel", "image": "/img/menu/nasi-timbel.jpg",
         "price": Decimal("35000.00"), "item_description": "Nasi bungkus daun pisang",
         "badge": "Best Seller", "rating": Decimal("4.8"), "currency": "Rp"},
        {**base, "category_id": 1, "category_name": "Makanan Utama",
         "category_slug": "makanan-utama", "category_description": "Hidangan khas Sunda",
         "id": 11, "title": "Gurame Bakar", "image": "/img/menu/gurame.jpg",
         "price": Decimal("85000.00"), "item_description": "Gurame bakar kecap",
         "badge": "Pedas &amp; Gurih", "rating": Decimal("4.5"), "currency": "Rp"},
        {**base, "category_id": 2, "category_name": "Minuman",
         "category_slug": "minuman", "category_description": None, "id": None},
        {**base, "category_id": 3, "category_name": "Camilan",
         "category_slug": "camilan", "category_description": "Teman ngobrol",
         "id": 30, "title": "Gehu", "price": 5000},
    ]


@pytest.fixture
def fake_database():
    """Stand-in for selerara_api.database.Database; ping succeeds by default."""
    database = MagicMock()
    database.ping = AsyncMock(return_value=None)
    database.dispose = AsyncMock(return_value=None)
    return database


@pytest_asyncio.fixture
async def test_client(mock_db_session, fake_database):
    """
    Provides an async HTTP test client for endpoint testing.

    The app gets fake_database as its pool and every data route receives
    mock_db_session through a dependency override. Lifespan events are not
    run by ASGITransport, so no real pool is ever built.
    """
    from selerara_api.database import get_db_session
    from selerara_api.main import create_app

    app = create_app(database=fake_database)

    async def _override_session():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
