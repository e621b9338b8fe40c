"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Handlers reach storage only through HobbyRepository
    - update() returns None and delete() returns False for a missing hobby;
      every other storage error propagates unchanged

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
"""

from typing import Any, Mapping, Protocol

from hobbies_api.core.domain_types import Hobby, HobbyFilter, HobbyId, NewHobby


class HobbyRepository(Protocol):
    """Contract for hobby persistence — implemented by shell."""
    async def find_by_id(self, hobby_id: HobbyId) -> Hobby | None: ...
    async def find_all(self, params: HobbyFilter) -> list[Hobby]: ...
    async def count(self, params: HobbyFilter) -> int: ...
    async def create(self, data: NewHobby) -> Hobby: ...
    async def update(
        self, hobby_id: HobbyId, changes: Mapping[str, Any],
    ) -> Hobby | None: ...
    async def delete(self, hobby_id: HobbyId) -> bool: ...
