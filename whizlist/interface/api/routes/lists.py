"""List routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from whizlist.application.usecase.collection import (
    CreateListRequest,
    CreateListUseCase,
    DeleteListRequest,
    DeleteListUseCase,
    GetListsRequest,
    GetListsResponse,
    GetListsUseCase,
    ListItem,
    UpdateListRequest,
    UpdateListUseCase,
)
from whizlist.domain.service import JWTService
from whizlist.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/lists", tags=["lists"], route_class=DishkaRoute)


class CreateListAPIRequest(BaseModel):
    """API request for creating a list."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    is_public: bool = False
    folder_id: str | None = None


class UpdateListAPIRequest(BaseModel):
    """API request for editing a list.

    Omitted fields are left unchanged; an explicit null folder_id takes the
    list out of its folder.
    """

    name: str | None = Field(default=None, max_length=200)
    description: str | None = None
    is_public: bool | None = None
    is_pinned: bool | None = None
    folder_id: str | None = None


@router.post("", response_model=ListItem, status_code=status.HTTP_201_CREATED)
async def create_list(
    request: CreateListAPIRequest,
    create_list_use_case: FromDishka[CreateListUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListItem:
    """Create a list."""
    user_id = require_user(jwt_service, credentials)
    return await create_list_use_case.execute(
        CreateListRequest(user_id=str(user_id), **request.model_dump())
    )


@router.get("", response_model=GetListsResponse)
async def get_lists(
    get_lists_use_case: FromDishka[GetListsUseCase],
    jwt_service: FromDishka[JWTService],
    folder_id: UUID | None = None,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetListsResponse:
    """Get the caller's lists with product counts."""
    user_id = require_user(jwt_service, credentials)
    return await get_lists_use_case.execute(
        GetListsRequest(
            user_id=str(user_id), folder_id=str(folder_id) if folder_id else None
        )
    )


@router.patch("/{list_id}", response_model=ListItem)
async def update_list(
    list_id: UUID,
    request: UpdateListAPIRequest,
    update_list_use_case: FromDishka[UpdateListUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListItem:
    """Edit a list or move it between folders."""
    user_id = require_user(jwt_service, credentials)
    return await update_list_use_case.execute(
        UpdateListRequest(
            list_id=str(list_id),
            user_id=str(user_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(
    list_id: UUID,
    delete_list_use_case: FromDishka[DeleteListUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Delete a list. Its products are kept."""
    user_id = require_user(jwt_service, credentials)
    await delete_list_use_case.execute(
        DeleteListRequest(list_id=str(list_id), user_id=str(user_id))
    )
