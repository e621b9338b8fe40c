"""Service test fixtures — in-memory HobbyRepository fake.

Invariants:
    - The fake honors the HobbyRepository protocol, including None/False for
      missing ids and IntegrityError for duplicate names
    - fail_with makes the next repository call raise the given exception
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from hobbies_api.core.domain_types import Hobby, HobbyId
from hobbies_api.services.hobby_handlers import HobbyHandlers


def unique_violation() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO hobbies ...", {},
        Exception("UNIQUE constraint failed: hobbies.name"),
    )


class InMemoryHobbyRepository:
    """Dict-backed stand-in for SqlAlchemyHobbyRepository."""

    def __init__(self):
        self.rows: dict[int, Hobby] = {}
        self.next_id = 1
        self.fail_with: Exception | None = None
        self.calls: list[tuple[str, object]] = []
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _record(self, op: str, arg: object) -> None:
        self.calls.append((op, arg))
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc

    def _matches(self, hobby, params) -> bool:
        if params.category is not None and hobby.category != params.category:
            return False
        if params.difficulty is not None and hobby.difficulty != params.difficulty:
            return False
        if params.is_active is not None and hobby.is_active != params.is_active:
            return False
        if params.search:
            term = params.search.lower()
            haystacks = [hobby.name, hobby.description or ""]
            if not any(term in h.lower() for h in haystacks):
                return False
        return True

    async def find_by_id(self, hobby_id):
        self._record("find_by_id", hobby_id)
        return self.rows.get(hobby_id)

    async def find_all(self, params):
        self._record("find_all", params)
        matching = [h for h in self.rows.values() if self._matches(h, params)]
        matching.sort(key=lambda h: (h.created_at, h.id), reverse=True)
        return matching[params.skip:params.skip + params.limit]

    async def count(self, params):
        self._record("count", params)
        return sum(1 for h in self.rows.values() if self._matches(h, params))

    async def create(self, data):
        self._record("create", data)
        if any(h.name == data.name for h in self.rows.values()):
            raise unique_violation()
        now = self._tick()
        hobby = Hobby(
            id=HobbyId(self.next_id), name=data.name,
            description=data.description, difficulty=data.difficulty,
            category=data.category, is_active=data.is_active,
            created_at=now, updated_at=now,
        )
        self.rows[hobby.id] = hobby
        self.next_id += 1
        return hobby

    async def update(self, hobby_id, changes):
        self._record("update", (hobby_id, dict(changes)))
        hobby = self.rows.get(hobby_id)
        if hobby is None:
            return None
        new_name = changes.get("name")
        if new_name and any(
            h.name == new_name and h.id != hobby_id for h in self.rows.values()
        ):
            raise unique_violation()
        fields = {
            k: v for k, v in changes.items()
            if v is not None or k == "description"
        }
        hobby = replace(hobby, **fields, updated_at=self._tick())
        self.rows[hobby_id] = hobby
        return hobby

    async def delete(self, hobby_id):
        self._record("delete", hobby_id)
        return self.rows.pop(hobby_id, None) is not None


@pytest.fixture
def fake_repository():
    return InMemoryHobbyRepository()


@pytest.fixture
def handlers(fake_repository):
    return HobbyHandlers(fake_repository)
