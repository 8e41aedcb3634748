"""List membership repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from whizlist.domain.model.product_list import ListMembership
from whizlist.domain.value import ListId, ProductId


class ListMembershipRepository(ABC):
    """Repository for list_products association rows.

    Implementations must tolerate concurrent calls from asyncio.gather.
    """

    @abstractmethod
    async def find_by_product(self, product_id: ProductId) -> List[ListMembership]:
        """Find every membership row of a product.

        Args:
            product_id: The product ID

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def find_by_list(self, list_id: ListId) -> List[ListMembership]:
        """Find every membership row of a list."""
        pass

    @abstractmethod
    async def add(self, list_id: ListId, product_id: ProductId) -> ListMembership:
        """Add a product to a list.

        Adding an existing membership is a no-op returning the existing row.

        Args:
            list_id: Target list
            product_id: Product to add

        Returns:
            The membership row
        """
        pass

    @abstractmethod
    async def remove(self, list_id: ListId, product_id: ProductId) -> bool:
        """Remove a product from a list.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def product_ids_by_lists(
        self,
        list_ids: Sequence[ListId],
    ) -> Dict[ListId, set[ProductId]]:
        """Collect member product IDs for multiple lists (batch query).

        Lists without members may be absent from the result.
        """
        pass
