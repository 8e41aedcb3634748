"""List use cases."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from whizlist.application.usecase.base import require_owner
from whizlist.domain.model import ProductList
from whizlist.domain.service import FolderService, ProductListService
from whizlist.domain.value import FolderId, ListId, UserId


class ListItem(BaseModel):
    """List item in response."""

    list_id: str
    name: str
    description: str | None
    is_public: bool
    is_pinned: bool
    folder_id: str | None
    owner_id: str
    product_count: int
    created_at: datetime
    updated_at: datetime


def list_to_item(product_list: ProductList) -> ListItem:
    return ListItem(
        list_id=str(product_list.id),
        name=product_list.name,
        description=product_list.description,
        is_public=product_list.is_public,
        is_pinned=product_list.is_pinned,
        folder_id=str(product_list.folder_id) if product_list.folder_id else None,
        owner_id=str(product_list.owner_id),
        product_count=product_list.product_count,
        created_at=product_list.created_at,
        updated_at=product_list.updated_at,
    )


class CreateListRequest(BaseModel):
    user_id: str
    name: str
    description: str | None = None
    is_public: bool = False
    folder_id: str | None = None


class CreateListUseCase:
    """Use case for creating a list."""

    def __init__(
        self, list_service: ProductListService, folder_service: FolderService
    ) -> None:
        self.list_service = list_service
        self.folder_service = folder_service

    async def execute(self, request: CreateListRequest) -> ListItem:
        """Execute create list flow.

        Raises:
            ValidationError: If the name is blank
            NotAuthorizedError: If the folder belongs to someone else
        """
        user_id = UserId(UUID(request.user_id))

        folder_id = None
        if request.folder_id:
            folder_id = FolderId(UUID(request.folder_id))
            folder = await self.folder_service.get_folder_by_id(folder_id)
            require_owner(folder.owner_id, user_id, "folder", request.folder_id)

        created = await self.list_service.create_list(
            owner_id=user_id,
            name=request.name,
            description=request.description,
            is_public=request.is_public,
            folder_id=folder_id,
        )
        return list_to_item(created)


class GetListsRequest(BaseModel):
    user_id: str
    folder_id: str | None = None  # Only lists inside this folder


class GetListsResponse(BaseModel):
    lists: list[ListItem]
    total: int


class GetListsUseCase:
    """Use case for listing a user's lists with product counts."""

    def __init__(self, list_service: ProductListService) -> None:
        self.list_service = list_service

    async def execute(self, request: GetListsRequest) -> GetListsResponse:
        lists = await self.list_service.get_lists_for_owner(
            UserId(UUID(request.user_id))
        )
        if request.folder_id:
            folder_id = FolderId(UUID(request.folder_id))
            lists = [pl for pl in lists if pl.folder_id == folder_id]

        return GetListsResponse(
            lists=[list_to_item(pl) for pl in lists], total=len(lists)
        )


class UpdateListRequest(BaseModel):
    """Update list request. Omitted fields are left unchanged.

    Setting folder_id to null takes the list out of its folder.
    """

    list_id: str
    user_id: str
    name: str | None = None
    description: str | None = None
    is_public: bool | None = None
    is_pinned: bool | None = None
    folder_id: str | None = None


class UpdateListUseCase:
    """Use case for editing a list or moving it between folders."""

    def __init__(
        self, list_service: ProductListService, folder_service: FolderService
    ) -> None:
        self.list_service = list_service
        self.folder_service = folder_service

    async def execute(self, request: UpdateListRequest) -> ListItem:
        """Execute update list flow.

        Raises:
            NotFoundError: If the list or folder does not exist
            NotAuthorizedError: If the user does not own them
            ValidationError: If a value is invalid
        """
        list_id = ListId(UUID(request.list_id))
        user_id = UserId(UUID(request.user_id))

        product_list = await self.list_service.get_list_by_id(list_id)
        require_owner(product_list.owner_id, user_id, "list", request.list_id)

        changes: dict[str, Any] = request.model_dump(
            exclude={"list_id", "user_id", "folder_id"}, exclude_unset=True
        )
        if changes:
            product_list = await self.list_service.update_list(list_id, changes)

        if "folder_id" in request.model_fields_set:
            folder_id = None
            if request.folder_id:
                folder_id = FolderId(UUID(request.folder_id))
                folder = await self.folder_service.get_folder_by_id(folder_id)
                require_owner(folder.owner_id, user_id, "folder", request.folder_id)
            product_list = await self.list_service.move_to_folder(list_id, folder_id)

        return list_to_item(product_list)


class DeleteListRequest(BaseModel):
    list_id: str
    user_id: str


class DeleteListUseCase:
    """Use case for deleting a list. Products survive, unassigned."""

    def __init__(self, list_service: ProductListService) -> None:
        self.list_service = list_service

    async def execute(self, request: DeleteListRequest) -> bool:
        list_id = ListId(UUID(request.list_id))
        product_list = await self.list_service.get_list_by_id(list_id)
        require_owner(
            product_list.owner_id, UserId(UUID(request.user_id)), "list", request.list_id
        )
        await self.list_service.delete_list(list_id)
        return True
