"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - HobbyId wraps int — never use a bare int for a hobby identity in domain logic
    - difficulty and category are closed sets encoded as str Enums
    - Hobby is the read model handed out by repositories (no ORM objects leak upward)
    - HobbyFilter.skip is always (page - 1) * limit

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: members compare equal to their raw string and serialize to JSON as-is
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

HobbyId = NewType("HobbyId", int)


# ─── Enums ───────────────────────────────────────────────────────

class HobbyDifficulty(str, Enum):
    """Skill level required by a hobby."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class HobbyCategory(str, Enum):
    """Broad grouping a hobby belongs to."""
    SPORTS = "sports"
    ARTS = "arts"
    TECHNOLOGY = "technology"
    OUTDOOR = "outdoor"
    INDOOR = "indoor"
    CREATIVE = "creative"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Hobby:
    """A stored hobby, as returned by the repository."""
    id: HobbyId
    name: str
    description: str | None
    difficulty: str
    category: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewHobby:
    """Validated input for creating a hobby (defaults already applied)."""
    name: str
    difficulty: str
    category: str
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class HobbyFilter:
    """List-narrowing parameters shared by find_all and count.

    None means "no constraint" for every optional field.
    """
    page: int = 1
    limit: int = 10
    category: str | None = None
    difficulty: str | None = None
    is_active: bool | None = None
    search: str | None = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit
