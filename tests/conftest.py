"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - The app's db_manager is swapped for the test manager and restored after
    - Lifespan never runs under ASGITransport, so no real database is touched

Design Decisions:
    - SQLite file over :memory: each repository call opens its own connection,
      and an in-memory database is private to one connection
"""

import os

# Ensure tests never point at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from hobbies_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from hobbies_api.infrastructure.hobby_repository import (  # noqa: E402
    SqlAlchemyHobbyRepository,
)
from hobbies_api.main import app  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'hobbies.db'}",
    )
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def repository(db_manager):
    return SqlAlchemyHobbyRepository(db_manager)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client wired to the per-test database."""
    original_manager = getattr(app.state, "db_manager", None)
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.db_manager = original_manager
