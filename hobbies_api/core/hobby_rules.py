"""Hobby Rules — pure validation predicates shared by the create and update paths.

Invariants:
    - Membership checks are exact and case-sensitive ("Beginner" is invalid)
    - Validators collect every violation, never stop at the first one
    - Update validation only looks at fields present in the change set
    - A well-formed id beyond the id column range names no hobby
    - No IO, no async, no framework imports

Design Decisions:
    - Allowed values derived from the domain Enums: one source of truth for
      both the runtime checks and the transport schemas
"""

import re
from typing import Any, Mapping

from hobbies_api.core.domain_types import HobbyCategory, HobbyDifficulty, HobbyId
from hobbies_api.core.errors import InvalidHobbyIdError

HOBBY_DIFFICULTIES: tuple[str, ...] = tuple(d.value for d in HobbyDifficulty)
HOBBY_CATEGORIES: tuple[str, ...] = tuple(c.value for c in HobbyCategory)

NAME_REQUIRED = "Name is required"
INVALID_DIFFICULTY = "Invalid difficulty level"
INVALID_CATEGORY = "Invalid category"

_HOBBY_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value the 32-bit integer id column can hold.
MAX_HOBBY_ID = 2**31 - 1


def is_valid_hobby_difficulty(value: Any) -> bool:
    return isinstance(value, str) and value in HOBBY_DIFFICULTIES


def is_valid_hobby_category(value: Any) -> bool:
    return isinstance(value, str) and value in HOBBY_CATEGORIES


def validate_new_hobby(
    name: str | None, difficulty: str | None, category: str | None,
) -> list[str]:
    """Return every rule a new hobby breaks, in name → difficulty → category order."""
    errors: list[str] = []
    if not name or not name.strip():
        errors.append(NAME_REQUIRED)
    if not is_valid_hobby_difficulty(difficulty):
        errors.append(INVALID_DIFFICULTY)
    if not is_valid_hobby_category(category):
        errors.append(INVALID_CATEGORY)
    return errors


def validate_hobby_changes(changes: Mapping[str, Any]) -> list[str]:
    """Return every rule a partial update breaks.

    Absent (or explicitly null) difficulty/category are not violations.
    """
    errors: list[str] = []
    difficulty = changes.get("difficulty")
    if difficulty is not None and not is_valid_hobby_difficulty(difficulty):
        errors.append(INVALID_DIFFICULTY)
    category = changes.get("category")
    if category is not None and not is_valid_hobby_category(category):
        errors.append(INVALID_CATEGORY)
    return errors


def parse_hobby_id(raw: str) -> HobbyId:
    """Parse a path segment into a HobbyId, rejecting anything but digits.

    Digit strings longer than any storable id clamp to MAX_HOBBY_ID + 1 so
    they are never converted in full.
    """
    if not isinstance(raw, str) or not _HOBBY_ID_PATTERN.fullmatch(raw):
        raise InvalidHobbyIdError(raw)
    if len(raw.lstrip("0")) > len(str(MAX_HOBBY_ID)):
        return HobbyId(MAX_HOBBY_ID + 1)
    return HobbyId(int(raw))


def is_storable_hobby_id(hobby_id: HobbyId) -> bool:
    """True when the id fits the id column and could name a stored hobby."""
    return hobby_id <= MAX_HOBBY_ID
