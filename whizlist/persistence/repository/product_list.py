"""PostgreSQL implementation of ProductList repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from whizlist.domain.model import ProductList
from whizlist.domain.repository import ProductListRepository
from whizlist.domain.value import FolderId, ListId, UserId
from whizlist.persistence.mappers import list_to_dict, row_to_list
from whizlist.persistence.tables import lists_table


class PostgresProductListRepository(ProductListRepository):
    """PostgreSQL implementation of ProductListRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, list_id: ListId) -> Optional[ProductList]:
        stmt = select(lists_table).where(lists_table.c.id == list_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_list(row._asdict()) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[ProductList]:
        stmt = (
            select(lists_table)
            .where(lists_table.c.owner_id == owner_id)
            .order_by(desc(lists_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_list(row._asdict()) for row in result.fetchall()]

    async def find_by_folder(self, folder_id: FolderId) -> List[ProductList]:
        stmt = (
            select(lists_table)
            .where(lists_table.c.folder_id == folder_id)
            .order_by(desc(lists_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_list(row._asdict()) for row in result.fetchall()]

    async def save(self, product_list: ProductList) -> ProductList:
        """Save a list (create or update)."""
        existing = await self.find_by_id(product_list.id)
        list_dict = list_to_dict(product_list)

        if existing:
            stmt = (
                lists_table.update()
                .where(lists_table.c.id == product_list.id)
                .values(**list_dict)
            )
        else:
            stmt = lists_table.insert().values(**list_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return product_list

    async def delete(self, list_id: ListId) -> None:
        """Delete a list.

        products.list_id is cleared by ON DELETE SET NULL and membership
        rows go by ON DELETE CASCADE.
        """
        stmt = delete(lists_table).where(lists_table.c.id == list_id)
        await self.session.execute(stmt)
        await self.session.flush()
