"""Storage error classification — unique violations vs everything else."""

from sqlalchemy.exc import IntegrityError, OperationalError

from hobbies_api.infrastructure.storage_errors import is_unique_violation


class _PgError(Exception):
    def __init__(self, message, sqlstate):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO hobbies ...", {}, orig)


def test_sqlite_unique_message_is_violation():
    exc = _integrity(Exception("UNIQUE constraint failed: hobbies.name"))
    assert is_unique_violation(exc)


def test_postgres_sqlstate_23505_is_violation():
    exc = _integrity(_PgError("duplicate key value violates unique constraint", "23505"))
    assert is_unique_violation(exc)


def test_postgres_other_sqlstate_is_not_violation():
    exc = _integrity(_PgError("null value in column violates not-null constraint", "23502"))
    assert not is_unique_violation(exc)


def test_sqlite_not_null_is_not_violation():
    exc = _integrity(Exception("NOT NULL constraint failed: hobbies.category"))
    assert not is_unique_violation(exc)


def test_non_integrity_errors_are_not_violations():
    assert not is_unique_violation(
        OperationalError("SELECT 1", {}, Exception("UNIQUE constraint failed")),
    )
    assert not is_unique_violation(ValueError("UNIQUE constraint failed"))
