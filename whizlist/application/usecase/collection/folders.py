"""Folder use cases."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from whizlist.application.usecase.base import require_owner
from whizlist.domain.model import Folder
from whizlist.domain.service import FolderService, ProductListService
from whizlist.domain.value import FolderId, UserId


class FolderItem(BaseModel):
    """Folder item in response."""

    folder_id: str
    name: str
    description: str | None
    is_public: bool
    is_pinned: bool
    parent_id: str | None
    owner_id: str
    list_count: int = 0
    created_at: datetime
    updated_at: datetime


def folder_to_item(folder: Folder, list_count: int = 0) -> FolderItem:
    return FolderItem(
        folder_id=str(folder.id),
        name=folder.name,
        description=folder.description,
        is_public=folder.is_public,
        is_pinned=folder.is_pinned,
        parent_id=str(folder.parent_id) if folder.parent_id else None,
        owner_id=str(folder.owner_id),
        list_count=list_count,
        created_at=folder.created_at,
        updated_at=folder.updated_at,
    )


class CreateFolderRequest(BaseModel):
    user_id: str
    name: str
    description: str | None = None
    is_public: bool = False
    parent_id: str | None = None


class CreateFolderUseCase:
    """Use case for creating a folder."""

    def __init__(self, folder_service: FolderService) -> None:
        self.folder_service = folder_service

    async def execute(self, request: CreateFolderRequest) -> FolderItem:
        """Execute create folder flow.

        Raises:
            ValidationError: If the name is blank
            NotAuthorizedError: If the parent folder belongs to someone else
        """
        user_id = UserId(UUID(request.user_id))

        parent_id = None
        if request.parent_id:
            parent_id = FolderId(UUID(request.parent_id))
            parent = await self.folder_service.get_folder_by_id(parent_id)
            require_owner(parent.owner_id, user_id, "folder", request.parent_id)

        created = await self.folder_service.create_folder(
            owner_id=user_id,
            name=request.name,
            description=request.description,
            is_public=request.is_public,
            parent_id=parent_id,
        )
        return folder_to_item(created)


class GetFoldersRequest(BaseModel):
    user_id: str


class GetFoldersResponse(BaseModel):
    folders: list[FolderItem]
    total: int


class GetFoldersUseCase:
    """Use case for listing a user's folders with list counts."""

    def __init__(
        self, folder_service: FolderService, list_service: ProductListService
    ) -> None:
        self.folder_service = folder_service
        self.list_service = list_service

    async def execute(self, request: GetFoldersRequest) -> GetFoldersResponse:
        user_id = UserId(UUID(request.user_id))
        folders = await self.folder_service.get_folders_for_owner(user_id)
        lists = await self.list_service.get_lists_for_owner(user_id)

        counts: dict[FolderId, int] = {}
        for product_list in lists:
            if product_list.folder_id is not None:
                counts[product_list.folder_id] = counts.get(product_list.folder_id, 0) + 1

        return GetFoldersResponse(
            folders=[folder_to_item(f, counts.get(f.id, 0)) for f in folders],
            total=len(folders),
        )


class UpdateFolderRequest(BaseModel):
    """Update folder request. Omitted fields are left unchanged."""

    folder_id: str
    user_id: str
    name: str | None = None
    description: str | None = None
    is_public: bool | None = None
    is_pinned: bool | None = None


class UpdateFolderUseCase:
    """Use case for editing a folder."""

    def __init__(self, folder_service: FolderService) -> None:
        self.folder_service = folder_service

    async def execute(self, request: UpdateFolderRequest) -> FolderItem:
        folder_id = FolderId(UUID(request.folder_id))
        folder = await self.folder_service.get_folder_by_id(folder_id)
        require_owner(
            folder.owner_id, UserId(UUID(request.user_id)), "folder", request.folder_id
        )

        changes: dict[str, Any] = request.model_dump(
            exclude={"folder_id", "user_id"}, exclude_unset=True
        )
        if changes:
            folder = await self.folder_service.update_folder(folder_id, changes)
        return folder_to_item(folder)


class DeleteFolderRequest(BaseModel):
    folder_id: str
    user_id: str


class DeleteFolderUseCase:
    """Use case for deleting a folder. Its lists survive, unfiled."""

    def __init__(
        self, folder_service: FolderService, list_service: ProductListService
    ) -> None:
        self.folder_service = folder_service
        self.list_service = list_service

    async def execute(self, request: DeleteFolderRequest) -> bool:
        folder_id = FolderId(UUID(request.folder_id))
        folder = await self.folder_service.get_folder_by_id(folder_id)
        require_owner(
            folder.owner_id, UserId(UUID(request.user_id)), "folder", request.folder_id
        )

        for product_list in await self.list_service.get_lists_in_folder(folder_id):
            await self.list_service.move_to_folder(product_list.id, None)

        await self.folder_service.delete_folder(folder_id)
        return True
