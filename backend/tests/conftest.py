"""
Noteful Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for gateway unit tests
    ├── test_settings:   Settings for a development-mode app
    ├── database:        Fresh in-memory SQLite database with tables created
    ├── app:             App built from test_settings + database
    ├── test_client:     HTTPX AsyncClient talking to `app`
    ├── seeded_folders:  Three folders inserted into `database`
    └── seeded_notes:    Three notes (one per seeded folder)
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
# The module-level `noteful.main.app` builds its engine from these
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from noteful.config import Settings
from noteful.database import Database
from noteful.main import create_app
from noteful.models.folder import Folder
from noteful.models.note import Note

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def make_folders_array():
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


def make_notes_array():
    modified = datetime(2018, 8, 15, 17, 0, tzinfo=timezone.utc)
    return [
        {
            "id": 1,
            "name": "Dogs",
            "modified": modified,
            "folder_id": 1,
            "content": "This is a test note. Note number one.",
        },
        {
            "id": 2,
            "name": "Cats",
            "modified": modified,
            "folder_id": 2,
            "content": "This is a test note. Note number two.",
        },
        {
            "id": 3,
            "name": "Pigs",
            "modified": modified,
            "folder_id": 3,
            "content": "This is a test note. Note number three.",
        },
    ]


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def test_settings():
    return Settings(
        environment="development",
        database_url=TEST_DATABASE_URL,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database():
    """An isolated in-memory database per test, schema already created."""
    db = Database(TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def app(test_settings, database):
    return create_app(test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the app in-process.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/folders")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded_folders(database):
    rows = make_folders_array()
    async with database.session() as session:
        session.add_all([Folder(**row) for row in rows])
    return rows


@pytest_asyncio.fixture
async def seeded_notes(database, seeded_folders):
    rows = make_notes_array()
    async with database.session() as session:
        session.add_all([Note(**row) for row in rows])
    return rows
