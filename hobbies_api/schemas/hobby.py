"""Hobby Schemas — Pydantic models for the HTTP boundary.

Invariants:
    - JSON uses camelCase (isActive, createdAt, totalPages); Python uses snake_case
    - Request schemas check types and lengths only; enum membership and
      required-field rules belong to the handlers (core/hobby_rules.py)
    - HobbyUpdate leaves unsupplied fields unset (model_fields_set drives partial writes)
    - ApiResponse is the single envelope for every successful response
    - createdAt/updatedAt always carry a UTC offset, whatever the store returns

Design Decisions:
    - create fields nullable at the boundary: a missing name is reported as
      "Name is required" together with the other rule violations
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases while accepting field names too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HobbyCreate(CamelModel):
    """POST /hobbies body."""
    name: str | None = Field(None, max_length=100)
    description: str | None = Field(None, max_length=500)
    difficulty: str | None = None
    category: str | None = None
    is_active: bool | None = None


class HobbyUpdate(CamelModel):
    """PUT /hobbies/{id} body — every field optional."""
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    difficulty: str | None = None
    category: str | None = None
    is_active: bool | None = None


class HobbyResponse(CamelModel):
    """Public-facing hobby record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    difficulty: str
    category: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Stores without timezone support hand back naive UTC values."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class PaginatedHobbies(CamelModel):
    """One page of hobbies plus the numbers needed to page further."""
    data: list[HobbyResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class ApiResponse(CamelModel, Generic[DataT]):
    """Uniform envelope: {success, data?, error?, message?}."""
    success: bool
    data: DataT | None = None
    error: str | None = None
    message: str | None = None
