"""Service test fixtures — file-backed SQLite gateway + FastAPI test client.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - get_database dependency overridden to hand the test gateway to routes
    - broken_database has its users table dropped, so every write fails

Design Decisions:
    - File-backed SQLite over :memory:: matches production and lets tests
      re-open the same store to check idempotent initialization
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from cadastro.api.deps import get_database
from cadastro.infrastructure.database import Database
from cadastro.main import app
from tests.services.db_helpers import sqlite_url


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
async def database(db_path):
    db = Database(sqlite_url(db_path))
    await db.init()
    yield db
    await db.close()


@pytest.fixture
async def broken_database(database):
    async with database.engine.begin() as conn:
        await conn.execute(text("DROP TABLE users"))
    return database


def _client_for(db) -> AsyncClient:
    app.dependency_overrides[get_database] = lambda: db
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(database):
    """FastAPI test client with the storage gateway overridden."""
    async with _client_for(database) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def broken_client(broken_database):
    """Test client whose gateway fails every write."""
    async with _client_for(broken_database) as c:
        yield c
    app.dependency_overrides.clear()
