"""Hobby Handlers — list, get, create, update, delete.

Invariants:
    - Semantic validation happens here (enum membership, required name); the
      transport has already checked types and lengths
    - Validation collects every violation before failing (HobbyValidationError)
    - Outcomes other than success are raised as HobbyApiError subclasses; the
      transport maps them to status codes
    - Unexpected storage failures become HobbyOperationError with a fixed
      message; the original exception is chained, never exposed
    - Name conflicts are classified from the storage error (no pre-check)

Design Decisions:
    - list runs count and fetch concurrently; a count that moves between the
      two reads can leave totalPages out of step with the page, and that is accepted
"""

import asyncio
import logging
import math

from hobbies_api.core.domain_types import HobbyFilter, NewHobby
from hobbies_api.core.errors import (
    HobbyConflictError,
    HobbyNotFoundError,
    HobbyOperationError,
    HobbyValidationError,
)
from hobbies_api.core.hobby_rules import (
    is_storable_hobby_id,
    parse_hobby_id,
    validate_hobby_changes,
    validate_new_hobby,
)
from hobbies_api.core.repository_protocols import HobbyRepository
from hobbies_api.infrastructure.storage_errors import is_unique_violation
from hobbies_api.schemas.hobby import (
    ApiResponse,
    HobbyCreate,
    HobbyResponse,
    HobbyUpdate,
    PaginatedHobbies,
)

logger = logging.getLogger(__name__)


class HobbyHandlers:
    """Request handlers for the /hobbies resource."""

    def __init__(self, repository: HobbyRepository):
        self.repository = repository

    async def list_hobbies(
        self, params: HobbyFilter,
    ) -> ApiResponse[PaginatedHobbies]:
        """Return one filtered page, newest first, with paging totals."""
        try:
            hobbies, total = await asyncio.gather(
                self.repository.find_all(params),
                self.repository.count(params),
            )
        except Exception as e:
            raise HobbyOperationError("Failed to fetch hobbies", "list") from e

        page = PaginatedHobbies(
            data=[HobbyResponse.model_validate(h) for h in hobbies],
            total=total,
            page=params.page,
            limit=params.limit,
            total_pages=math.ceil(total / params.limit),
        )
        return ApiResponse(
            success=True, data=page, message=f"Found {len(hobbies)} hobbies",
        )

    async def get_hobby(self, raw_id: str) -> ApiResponse[HobbyResponse]:
        hobby_id = parse_hobby_id(raw_id)
        if not is_storable_hobby_id(hobby_id):
            raise HobbyNotFoundError(hobby_id)
        try:
            hobby = await self.repository.find_by_id(hobby_id)
        except Exception as e:
            raise HobbyOperationError("Failed to fetch hobby", "get") from e
        if hobby is None:
            raise HobbyNotFoundError(hobby_id)
        return ApiResponse(
            success=True,
            data=HobbyResponse.model_validate(hobby),
            message="Hobby retrieved successfully",
        )

    async def create_hobby(self, body: HobbyCreate) -> ApiResponse[HobbyResponse]:
        """Validate all rules at once, then insert with defaults applied."""
        errors = validate_new_hobby(body.name, body.difficulty, body.category)
        if errors:
            raise HobbyValidationError(errors)

        new_hobby = NewHobby(
            name=body.name,
            difficulty=body.difficulty,
            category=body.category,
            description=body.description or None,
            is_active=True if body.is_active is None else body.is_active,
        )
        try:
            hobby = await self.repository.create(new_hobby)
        except Exception as e:
            if is_unique_violation(e):
                raise HobbyConflictError() from e
            raise HobbyOperationError("Failed to create hobby", "create") from e

        return ApiResponse(
            success=True,
            data=HobbyResponse.model_validate(hobby),
            message="Hobby created successfully",
        )

    async def update_hobby(
        self, raw_id: str, body: HobbyUpdate,
    ) -> ApiResponse[HobbyResponse]:
        """Write only the fields present in the body."""
        hobby_id = parse_hobby_id(raw_id)
        changes = body.model_dump(exclude_unset=True)
        errors = validate_hobby_changes(changes)
        if errors:
            raise HobbyValidationError(errors)

        if not is_storable_hobby_id(hobby_id):
            raise HobbyNotFoundError(hobby_id)
        try:
            hobby = await self.repository.update(hobby_id, changes)
        except Exception as e:
            if is_unique_violation(e):
                raise HobbyConflictError() from e
            raise HobbyOperationError("Failed to update hobby", "update") from e
        if hobby is None:
            raise HobbyNotFoundError(hobby_id)

        logger.info(
            f"Hobby updated: {sorted(changes)}", extra={"hobby_id": hobby_id},
        )
        return ApiResponse(
            success=True,
            data=HobbyResponse.model_validate(hobby),
            message="Hobby updated successfully",
        )

    async def delete_hobby(self, raw_id: str) -> ApiResponse[None]:
        hobby_id = parse_hobby_id(raw_id)
        if not is_storable_hobby_id(hobby_id):
            raise HobbyNotFoundError(hobby_id)
        try:
            deleted = await self.repository.delete(hobby_id)
        except Exception as e:
            raise HobbyOperationError("Failed to delete hobby", "delete") from e
        if not deleted:
            raise HobbyNotFoundError(hobby_id)

        logger.info("Hobby deleted", extra={"hobby_id": hobby_id})
        return ApiResponse(
            success=True, data=None, message="Hobby deleted successfully",
        )
