"""In-memory list membership repository for testing."""

import asyncio
from typing import Sequence

from whizlist.domain.model.product_list import ListMembership
from whizlist.domain.repository.list_membership import ListMembershipRepository
from whizlist.domain.value import ListId, ProductId


class InMemoryListMembershipRepository(ListMembershipRepository):
    """In-memory implementation of ListMembershipRepository for testing.

    Writes yield to the event loop once so that concurrent callers really
    interleave, as they would against the database.
    """

    def __init__(self) -> None:
        self._rows: dict[tuple[ListId, ProductId], ListMembership] = {}

    async def find_by_product(self, product_id: ProductId) -> list[ListMembership]:
        return [m for m in self._rows.values() if m.product_id == product_id]

    async def find_by_list(self, list_id: ListId) -> list[ListMembership]:
        rows = [m for m in self._rows.values() if m.list_id == list_id]
        return sorted(rows, key=lambda m: m.added_at)

    async def add(self, list_id: ListId, product_id: ProductId) -> ListMembership:
        await asyncio.sleep(0)
        key = (list_id, product_id)
        if key not in self._rows:
            self._rows[key] = ListMembership(list_id=list_id, product_id=product_id)
        return self._rows[key]

    async def remove(self, list_id: ListId, product_id: ProductId) -> bool:
        await asyncio.sleep(0)
        return self._rows.pop((list_id, product_id), None) is not None

    async def product_ids_by_lists(
        self,
        list_ids: Sequence[ListId],
    ) -> dict[ListId, set[ProductId]]:
        wanted = set(list_ids)
        members: dict[ListId, set[ProductId]] = {}
        for list_id, product_id in self._rows:
            if list_id in wanted:
                members.setdefault(list_id, set()).add(product_id)
        return members
