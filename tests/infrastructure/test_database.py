"""DatabaseSessionManager — rollback re-raises, health checks, table creation."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from hobbies_api.infrastructure.database import DatabaseSessionManager


async def test_health_check_true_for_live_database(db_manager):
    assert await db_manager.health_check() is True


async def test_health_check_false_for_unreachable_database(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}",
    )
    try:
        assert await manager.health_check() is False
    finally:
        await manager.close()


async def test_create_all_creates_hobbies_table(db_manager):
    async with db_manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM hobbies"))
        assert result.scalar_one() == 0


async def test_session_reraises_original_storage_error(db_manager):
    with pytest.raises(OperationalError):
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
