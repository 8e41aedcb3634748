"""List and folder use cases."""

from .folders import (
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
    folder_to_item,
)
from .lists import (
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
    list_to_item,
)

__all__ = [
    "CreateFolderRequest",
    "CreateFolderUseCase",
    "CreateListRequest",
    "CreateListUseCase",
    "DeleteFolderRequest",
    "DeleteFolderUseCase",
    "DeleteListRequest",
    "DeleteListUseCase",
    "FolderItem",
    "GetFoldersRequest",
    "GetFoldersResponse",
    "GetFoldersUseCase",
    "GetListsRequest",
    "GetListsResponse",
    "GetListsUseCase",
    "ListItem",
    "UpdateFolderRequest",
    "UpdateFolderUseCase",
    "UpdateListRequest",
    "UpdateListUseCase",
    "folder_to_item",
    "list_to_item",
]
