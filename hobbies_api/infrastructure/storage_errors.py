"""Storage Error Classification — the one place that knows how drivers report conflicts.

Invariants:
    - is_unique_violation() is True only for IntegrityError caused by a unique constraint
    - Anything else (FK, NOT NULL, connection loss) is classified as not-a-conflict

Design Decisions:
    - Classify after the write instead of checking for the name first: no
      check-then-act window between two concurrent creates
    - SQLSTATE first (PostgreSQL/asyncpg), message text as fallback (SQLite)
"""

from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: BaseException) -> bool:
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message
