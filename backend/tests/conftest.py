"""
Palette Picker Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests (no DB)
    ├── database:        Fresh SQLite file per test, tables created, seeded
    ├── db_session:      Session on that database for direct assertions
    └── test_client:     HTTPX AsyncClient talking to an app built on `database`
"""

import os

# Select the test profile BEFORE any application import reads settings
os.environ["ENVIRONMENT"] = "test"
os.environ["TEST_DATABASE_URL"] = "sqlite+aiosqlite:///./palette_picker_test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from palette_picker.database import Database  # noqa: E402
from palette_picker.seeds import seed_database  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_project(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = project
            result = await project_service.get_project(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_palette_data():
    """A complete palette-create payload (project_id filled in by the test)."""
    return {
        "name": "Forest",
        "color1": "#2D6A4F",
        "color2": "#40916C",
        "color3": "#52B788",
        "color4": "#74C69D",
        "color5": "#95D5B2",
    }


# ══════════════════════════════════════════════════════════════════════════
# Integration Fixtures (real SQLite database)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """
    A seeded SQLite database private to one test.

    Every test starts from the rows in palette_picker.seeds.SEED_PROJECTS.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'palette_picker.db'}")
    db.open()
    await db.create_all()
    async with db.session() as session:
        await seed_database(session)
        await session.commit()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(database) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from palette_picker.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
