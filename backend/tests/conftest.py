"""
Client Records Backend: Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_record_data: Column values for one client_records row
    ├── db_tables: Creates the schema in a throwaway SQLite file, drops it afterwards
    └── test_client: HTTPX AsyncClient talking to the app over ASGI
"""

import os
import tempfile
from datetime import date
from unittest.mock import AsyncMock

# Settings are read at import time, so the environment has to be in place
# before anything from `app` is imported
_test_dir = tempfile.mkdtemp(prefix="client_records_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_record(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = record
            result = await client_record_service.get_record(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def sample_record_data():
    """Column values for a single stored row."""
    return {
        "id": 1,
        "username": "inkwell_artist",
        "payment_status": "paid",
        "commission_status": "in progress",
        "deadline": date(2024, 3, 1),
    }


@pytest_asyncio.fixture
async def db_tables():
    """
    Creates every table on the test engine and drops them after the test.

    The engine is disposed at the end as well: pooled aiosqlite connections
    are bound to the event loop of the test that opened them.
    """
    from app.database import Base, engine
    from app.models.client_record import ClientRecord  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    Provides an async HTTP test client backed by the SQLite test database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/test")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
