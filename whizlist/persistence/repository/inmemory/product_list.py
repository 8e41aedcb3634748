"""In-memory list repository for testing."""

from typing import Optional

from whizlist.domain.model.product_list import ProductList
from whizlist.domain.repository.product_list import ProductListRepository
from whizlist.domain.value import FolderId, ListId, UserId


class InMemoryProductListRepository(ProductListRepository):
    """In-memory implementation of ProductListRepository for testing."""

    def __init__(self) -> None:
        self._lists: dict[ListId, ProductList] = {}

    async def find_by_id(self, list_id: ListId) -> Optional[ProductList]:
        return self._lists.get(list_id)

    async def find_by_owner(self, owner_id: UserId) -> list[ProductList]:
        lists = [pl for pl in self._lists.values() if pl.owner_id == owner_id]
        return sorted(lists, key=lambda pl: pl.created_at, reverse=True)

    async def find_by_folder(self, folder_id: FolderId) -> list[ProductList]:
        lists = [pl for pl in self._lists.values() if pl.folder_id == folder_id]
        return sorted(lists, key=lambda pl: pl.created_at, reverse=True)

    async def save(self, product_list: ProductList) -> ProductList:
        # product_count is derived, never stored
        stored = product_list.model_copy(update={"product_count": 0})
        self._lists[stored.id] = stored
        return product_list

    async def delete(self, list_id: ListId) -> None:
        self._lists.pop(list_id, None)
