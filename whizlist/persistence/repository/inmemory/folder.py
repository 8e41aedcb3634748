"""In-memory folder repository for testing."""

from typing import Optional

from whizlist.domain.model.folder import Folder
from whizlist.domain.repository.folder import FolderRepository
from whizlist.domain.value import FolderId, UserId


class InMemoryFolderRepository(FolderRepository):
    """In-memory implementation of FolderRepository for testing."""

    def __init__(self) -> None:
        self._folders: dict[FolderId, Folder] = {}

    async def find_by_id(self, folder_id: FolderId) -> Optional[Folder]:
        return self._folders.get(folder_id)

    async def find_by_owner(self, owner_id: UserId) -> list[Folder]:
        folders = [f for f in self._folders.values() if f.owner_id == owner_id]
        return sorted(folders, key=lambda f: f.created_at, reverse=True)

    async def save(self, folder: Folder) -> Folder:
        self._folders[folder.id] = folder
        return folder

    async def delete(self, folder_id: FolderId) -> None:
        self._folders.pop(folder_id, None)
