"""Folder routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from whizlist.application.usecase.collection import (
    CreateFolderRequest,
    CreateFolderUseCase,
    DeleteFolderRequest,
    DeleteFolderUseCase,
    FolderItem,
    GetFoldersRequest,
    GetFoldersResponse,
    GetFoldersUseCase,
    UpdateFolderRequest,
    UpdateFolderUseCase,
)
from whizlist.domain.service import JWTService
from whizlist.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/folders", tags=["folders"], route_class=DishkaRoute)


class CreateFolderAPIRequest(BaseModel):
    """API request for creating a folder."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    is_public: bool = False
    parent_id: str | None = None


class UpdateFolderAPIRequest(BaseModel):
    """API request for editing a folder."""

    name: str | None = Field(default=None, max_length=200)
    description: str | None = None
    is_public: bool | None = None
    is_pinned: bool | None = None


@router.post("", response_model=FolderItem, status_code=status.HTTP_201_CREATED)
async def create_folder(
    request: CreateFolderAPIRequest,
    create_folder_use_case: FromDishka[CreateFolderUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> FolderItem:
    """Create a folder."""
    user_id = require_user(jwt_service, credentials)
    return await create_folder_use_case.execute(
        CreateFolderRequest(user_id=str(user_id), **request.model_dump())
    )


@router.get("", response_model=GetFoldersResponse)
async def get_folders(
    get_folders_use_case: FromDishka[GetFoldersUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetFoldersResponse:
    """Get the caller's folders with list counts."""
    user_id = require_user(jwt_service, credentials)
    return await get_folders_use_case.execute(GetFoldersRequest(user_id=str(user_id)))


@router.patch("/{folder_id}", response_model=FolderItem)
async def update_folder(
    folder_id: UUID,
    request: UpdateFolderAPIRequest,
    update_folder_use_case: FromDishka[UpdateFolderUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> FolderItem:
    """Edit a folder."""
    user_id = require_user(jwt_service, credentials)
    return await update_folder_use_case.execute(
        UpdateFolderRequest(
            folder_id=str(folder_id),
            user_id=str(user_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(
    folder_id: UUID,
    delete_folder_use_case: FromDishka[DeleteFolderUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> None:
    """Delete a folder. Its lists are kept, outside any folder."""
    user_id = require_user(jwt_service, credentials)
    await delete_folder_use_case.execute(
        DeleteFolderRequest(folder_id=str(folder_id), user_id=str(user_id))
    )
