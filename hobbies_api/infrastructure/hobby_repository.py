"""Hobby Repository — SQLAlchemy implementation of the HobbyRepository protocol.

Invariants:
    - Sole owner of persistence access for hobbies; returns domain Hobby records, never ORM rows
    - Every call opens its own session from the shared manager, so find_all and
      count can run concurrently
    - find_all/count share one filter builder: absent filter field = no constraint
    - find_all orders newest created_at first (id breaks ties)
    - update() → None and delete() → False for a missing id; other errors propagate
    - created_at == updated_at at creation; update always refreshes updated_at

Design Decisions:
    - Values re-read after commit (refresh): responses reflect what the
      database stored, including its timestamp precision
    - search escapes LIKE wildcards (icontains autoescape)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy import Select, delete, func, or_, select

from hobbies_api.core.domain_types import Hobby, HobbyFilter, HobbyId, NewHobby
from hobbies_api.infrastructure.database import DatabaseSessionManager
from hobbies_api.models.hobby import Hobby as HobbyModel

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "difficulty", "category", "is_active")
NULLABLE_FIELDS = frozenset({"description"})


def _to_domain(row: HobbyModel) -> Hobby:
    return Hobby(
        id=HobbyId(row.id),
        name=row.name,
        description=row.description,
        difficulty=row.difficulty,
        category=row.category,
        is_active=row.is_active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def apply_hobby_filters(query: Select, params: HobbyFilter) -> Select:
    """Add WHERE clauses for every filter field that is present."""
    if params.category is not None:
        query = query.where(HobbyModel.category == params.category)
    if params.difficulty is not None:
        query = query.where(HobbyModel.difficulty == params.difficulty)
    if params.is_active is not None:
        query = query.where(HobbyModel.is_active.is_(params.is_active))
    if params.search:
        query = query.where(
            or_(
                HobbyModel.name.icontains(params.search, autoescape=True),
                HobbyModel.description.icontains(params.search, autoescape=True),
            ),
        )
    return query


class SqlAlchemyHobbyRepository:
    """Hobby persistence over an async SQLAlchemy session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def find_by_id(self, hobby_id: HobbyId) -> Hobby | None:
        async with self.db_manager.session() as db:
            row = await db.get(HobbyModel, hobby_id)
            return _to_domain(row) if row else None

    async def find_all(self, params: HobbyFilter) -> list[Hobby]:
        query = apply_hobby_filters(select(HobbyModel), params)
        query = (
            query.order_by(HobbyModel.created_at.desc(), HobbyModel.id.desc())
            .offset(params.skip)
            .limit(params.limit)
        )
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return [_to_domain(row) for row in result.scalars().all()]

    async def count(self, params: HobbyFilter) -> int:
        query = apply_hobby_filters(
            select(func.count()).select_from(HobbyModel), params,
        )
        async with self.db_manager.session() as db:
            result = await db.execute(query)
            return result.scalar_one()

    async def create(self, data: NewHobby) -> Hobby:
        now = datetime.now(timezone.utc)
        row = HobbyModel(
            name=data.name,
            description=data.description,
            difficulty=data.difficulty,
            category=data.category,
            is_active=data.is_active,
            created_at=now,
            updated_at=now,
        )
        async with self.db_manager.session() as db:
            db.add(row)
            await db.commit()
            await db.refresh(row)
            logger.info(
                f"Hobby created: {row.name}", extra={"hobby_id": row.id},
            )
            return _to_domain(row)

    async def update(
        self, hobby_id: HobbyId, changes: Mapping[str, Any],
    ) -> Hobby | None:
        async with self.db_manager.session() as db:
            row = await db.get(HobbyModel, hobby_id)
            if row is None:
                return None
            for field in UPDATABLE_FIELDS:
                if field not in changes:
                    continue
                value = changes[field]
                if value is None and field not in NULLABLE_FIELDS:
                    continue
                setattr(row, field, value)
            row.updated_at = datetime.now(timezone.utc)
            await db.commit()
            await db.refresh(row)
            return _to_domain(row)

    async def delete(self, hobby_id: HobbyId) -> bool:
        async with self.db_manager.session() as db:
            result = await db.execute(
                delete(HobbyModel).where(HobbyModel.id == hobby_id),
            )
            await db.commit()
            return result.rowcount > 0
