"""PostgreSQL implementation of ListMembership repository."""

import asyncio
from typing import Dict, List, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from whizlist.domain.model import ListMembership
from whizlist.domain.repository import ListMembershipRepository
from whizlist.domain.value import ListId, ProductId
from whizlist.persistence.mappers import row_to_membership
from whizlist.persistence.tables import list_products_table


class PostgresListMembershipRepository(ListMembershipRepository):
    """PostgreSQL implementation of ListMembershipRepository.

    Bulk reconciliation issues calls concurrently through asyncio.gather,
    but an AsyncSession allows one operation at a time, so every call holds
    a lock for its duration.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._lock = asyncio.Lock()

    async def find_by_product(self, product_id: ProductId) -> List[ListMembership]:
        stmt = select(list_products_table).where(
            list_products_table.c.product_id == product_id
        )
        async with self._lock:
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_membership(row._asdict()) for row in rows]

    async def find_by_list(self, list_id: ListId) -> List[ListMembership]:
        stmt = (
            select(list_products_table)
            .where(list_products_table.c.list_id == list_id)
            .order_by(list_products_table.c.added_at)
        )
        async with self._lock:
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_membership(row._asdict()) for row in rows]

    async def add(self, list_id: ListId, product_id: ProductId) -> ListMembership:
        """Add a product to a list, ignoring an existing membership."""
        insert_stmt = (
            insert(list_products_table)
            .values(list_id=list_id, product_id=product_id)
            .on_conflict_do_nothing(index_elements=["list_id", "product_id"])
        )
        select_stmt = select(list_products_table).where(
            and_(
                list_products_table.c.list_id == list_id,
                list_products_table.c.product_id == product_id,
            )
        )
        async with self._lock:
            await self.session.execute(insert_stmt)
            await self.session.flush()
            result = await self.session.execute(select_stmt)
            row = result.fetchone()
        if row is None:
            return ListMembership(list_id=list_id, product_id=product_id)
        return row_to_membership(row._asdict())

    async def remove(self, list_id: ListId, product_id: ProductId) -> bool:
        stmt = delete(list_products_table).where(
            and_(
                list_products_table.c.list_id == list_id,
                list_products_table.c.product_id == product_id,
            )
        )
        async with self._lock:
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def product_ids_by_lists(
        self,
        list_ids: Sequence[ListId],
    ) -> Dict[ListId, set[ProductId]]:
        """Collect member product IDs for multiple lists (batch query)."""
        if not list_ids:
            return {}

        stmt = select(
            list_products_table.c.list_id, list_products_table.c.product_id
        ).where(list_products_table.c.list_id.in_(list_ids))
        async with self._lock:
            result = await self.session.execute(stmt)
            rows = result.fetchall()

        members: Dict[ListId, set[ProductId]] = {}
        for list_id, product_id in rows:
            members.setdefault(ListId(list_id), set()).add(ProductId(product_id))
        return members
