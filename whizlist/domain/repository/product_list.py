"""List repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from whizlist.domain.model.product_list import ProductList
from whizlist.domain.value import FolderId, ListId, UserId


class ProductListRepository(ABC):
    """Repository for ProductList entity."""

    @abstractmethod
    async def find_by_id(self, list_id: ListId) -> Optional[ProductList]:
        """Find a list by ID.

        Args:
            list_id: The list's unique identifier

        Returns:
            The list if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[ProductList]:
        """Find all lists owned by a user, newest first."""
        pass

    @abstractmethod
    async def find_by_folder(self, folder_id: FolderId) -> List[ProductList]:
        """Find all lists inside a folder."""
        pass

    @abstractmethod
    async def save(self, product_list: ProductList) -> ProductList:
        """Save a list (create or update)."""
        pass

    @abstractmethod
    async def delete(self, list_id: ListId) -> None:
        """Delete a list row.

        The list service unassigns products and drops memberships first.
        """
        pass
