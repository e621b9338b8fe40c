"""Hobby ORM — the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key, never reused after deletion
    - name is unique (enforced by the database, surfaced as a conflict)
    - difficulty/category stored as plain strings; membership checked before writes
    - created_at and updated_at are timezone-aware UTC on write

Design Decisions:
    - String columns over DB enums: no migration when the closed sets change
    - sqlite_autoincrement: SQLite otherwise recycles the highest deleted rowid
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hobbies_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Hobby(Base):
    """Hobby row."""
    __tablename__ = "hobbies"
    __table_args__ = (
        Index("ix_hobbies_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    description: Mapped[str | None] = mapped_column(
        String(500), nullable=True,
    )
    difficulty: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
