"""Sample Data Seeding — fills an empty database with ten example hobbies.

Usage:
    python -m hobbies_api.db.seed

Invariants:
    - Writes go through the repository, same path as POST /hobbies
    - Re-running is safe: hobbies whose name already exists are skipped
"""

import asyncio
import logging

from hobbies_api.config import get_settings
from hobbies_api.core.domain_types import Hobby, NewHobby
from hobbies_api.core.repository_protocols import HobbyRepository
from hobbies_api.infrastructure.database import DatabaseSessionManager
from hobbies_api.infrastructure.hobby_repository import SqlAlchemyHobbyRepository
from hobbies_api.infrastructure.observability import setup_logging
from hobbies_api.infrastructure.storage_errors import is_unique_violation

logger = logging.getLogger(__name__)

SAMPLE_HOBBIES: tuple[NewHobby, ...] = (
    NewHobby(
        name="Photography",
        description="Capturing beautiful moments and memories through the lens",
        difficulty="intermediate", category="arts",
    ),
    NewHobby(
        name="Rock Climbing",
        description="Ascending natural rock formations or artificial climbing walls",
        difficulty="advanced", category="outdoor",
    ),
    NewHobby(
        name="Chess",
        description="Strategic board game of skill and tactics",
        difficulty="intermediate", category="indoor",
    ),
    NewHobby(
        name="Programming",
        description="Creating software applications and solving problems with code",
        difficulty="intermediate", category="technology",
    ),
    NewHobby(
        name="Swimming",
        description="Moving through water using various strokes and techniques",
        difficulty="beginner", category="sports",
    ),
    NewHobby(
        name="Painting",
        description="Creating art using pigments and various painting techniques",
        difficulty="beginner", category="arts",
    ),
    NewHobby(
        name="Hiking",
        description="Walking in natural environments, often in mountainous areas",
        difficulty="beginner", category="outdoor",
    ),
    NewHobby(
        name="3D Printing",
        description="Creating physical objects from digital designs using additive manufacturing",
        difficulty="advanced", category="technology", is_active=False,
    ),
    NewHobby(
        name="Cooking",
        description="Preparing delicious meals and exploring culinary arts",
        difficulty="intermediate", category="indoor",
    ),
    NewHobby(
        name="Basketball",
        description="Team sport involving shooting a ball through a hoop",
        difficulty="intermediate", category="sports",
    ),
)


async def seed_hobbies(
    repository: HobbyRepository,
    hobbies: tuple[NewHobby, ...] = SAMPLE_HOBBIES,
) -> list[Hobby]:
    """Insert each hobby, skipping names that already exist. Returns those created."""
    created: list[Hobby] = []
    for new_hobby in hobbies:
        try:
            hobby = await repository.create(new_hobby)
        except Exception as e:
            if not is_unique_violation(e):
                raise
            logger.warning(f"Skipping existing hobby: {new_hobby.name}")
            continue
        created.append(hobby)
    return created


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    db_manager = DatabaseSessionManager(settings.database_url)
    try:
        await db_manager.create_all()
        created = await seed_hobbies(SqlAlchemyHobbyRepository(db_manager))
        logger.info(f"Seeding completed: {len(created)} hobbies created")
    finally:
        await db_manager.close()


if __name__ == "__main__":
    asyncio.run(main())
