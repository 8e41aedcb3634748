"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from whizlist.domain.model.product import Product
from whizlist.domain.value import ListId, ProductId, UserId


class ProductRepository(ABC):
    """Repository for Product aggregate."""

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Find a product by ID.

        Args:
            product_id: The product's unique identifier

        Returns:
            The product if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Product]:
        """Find all products owned by a user, newest first.

        Args:
            owner_id: The owner's user ID

        Returns:
            List of products
        """
        pass

    @abstractmethod
    async def find_by_home_list(self, list_id: ListId) -> List[Product]:
        """Find products whose home list is the given list."""
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Save a product (create or update).

        Args:
            product: The product to save

        Returns:
            The saved product
        """
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> None:
        """Delete a product row."""
        pass
