"""Hobby Routes — HTTP transport for the /hobbies resource.

Invariants:
    - Routes parse and type-check input only; every rule lives in HobbyHandlers
    - Path ids arrive as raw strings so a non-numeric id is a 400, not a 422
    - Error outcomes are raised by handlers and rendered by api/error_handlers.py
    - Responses omit unset envelope fields (error is absent on success)
"""

from fastapi import APIRouter, Depends, Query, status

from hobbies_api.core.domain_types import (
    HobbyCategory, HobbyDifficulty, HobbyFilter,
)
from hobbies_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from hobbies_api.infrastructure.hobby_repository import SqlAlchemyHobbyRepository
from hobbies_api.schemas.hobby import (
    ApiResponse, HobbyCreate, HobbyResponse, HobbyUpdate, PaginatedHobbies,
)
from hobbies_api.services.hobby_handlers import HobbyHandlers

router = APIRouter(prefix="/hobbies", tags=["hobbies"])


def get_hobby_handlers(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> HobbyHandlers:
    return HobbyHandlers(SqlAlchemyHobbyRepository(db_manager))


@router.get(
    "", response_model=ApiResponse[PaginatedHobbies],
    response_model_exclude_unset=True,
)
async def list_hobbies(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: HobbyCategory | None = Query(None),
    difficulty: HobbyDifficulty | None = Query(None),
    is_active: bool | None = Query(None, alias="isActive"),
    search: str | None = Query(None),
    handlers: HobbyHandlers = Depends(get_hobby_handlers),
):
    """List hobbies with pagination and filtering."""
    params = HobbyFilter(
        page=page,
        limit=limit,
        category=category.value if category else None,
        difficulty=difficulty.value if difficulty else None,
        is_active=is_active,
        search=search,
    )
    return await handlers.list_hobbies(params)


@router.get(
    "/{hobby_id}", response_model=ApiResponse[HobbyResponse],
    response_model_exclude_unset=True,
)
async def get_hobby(
    hobby_id: str, handlers: HobbyHandlers = Depends(get_hobby_handlers),
):
    return await handlers.get_hobby(hobby_id)


@router.post(
    "", response_model=ApiResponse[HobbyResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_hobby(
    body: HobbyCreate, handlers: HobbyHandlers = Depends(get_hobby_handlers),
):
    return await handlers.create_hobby(body)


@router.put(
    "/{hobby_id}", response_model=ApiResponse[HobbyResponse],
    response_model_exclude_unset=True,
)
async def update_hobby(
    hobby_id: str,
    body: HobbyUpdate,
    handlers: HobbyHandlers = Depends(get_hobby_handlers),
):
    return await handlers.update_hobby(hobby_id, body)


@router.delete(
    "/{hobby_id}", response_model=ApiResponse[None],
    response_model_exclude_unset=True,
)
async def delete_hobby(
    hobby_id: str, handlers: HobbyHandlers = Depends(get_hobby_handlers),
):
    return await handlers.delete_hobby(hobby_id)
