"""Folder repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from whizlist.domain.model.folder import Folder
from whizlist.domain.value import FolderId, UserId


class FolderRepository(ABC):
    """Repository for Folder entity."""

    @abstractmethod
    async def find_by_id(self, folder_id: FolderId) -> Optional[Folder]:
        """Find a folder by ID.

        Args:
            folder_id: The folder's unique identifier

        Returns:
            The folder if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Folder]:
        """Find all folders owned by a user, newest first."""
        pass

    @abstractmethod
    async def save(self, folder: Folder) -> Folder:
        """Save a folder (create or update)."""
        pass

    @abstractmethod
    async def delete(self, folder_id: FolderId) -> None:
        """Delete a folder row.

        Callers unfile the lists inside it first.
        """
        pass
