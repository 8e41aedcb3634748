"""PostgreSQL implementation of Product repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from whizlist.domain.model import Product
from whizlist.domain.repository import ProductRepository
from whizlist.domain.value import ListId, ProductId, UserId
from whizlist.persistence.mappers import product_to_dict, row_to_product
from whizlist.persistence.tables import products_table


class PostgresProductRepository(ProductRepository):
    """PostgreSQL implementation of ProductRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        stmt = select(products_table).where(products_table.c.id == product_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_product(row._asdict()) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[Product]:
        stmt = (
            select(products_table)
            .where(products_table.c.owner_id == owner_id)
            .order_by(desc(products_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_product(row._asdict()) for row in result.fetchall()]

    async def find_by_home_list(self, list_id: ListId) -> List[Product]:
        stmt = (
            select(products_table)
            .where(products_table.c.list_id == list_id)
            .order_by(desc(products_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_product(row._asdict()) for row in result.fetchall()]

    async def save(self, product: Product) -> Product:
        """Save a product (create or update)."""
        existing = await self.find_by_id(product.id)
        product_dict = product_to_dict(product)

        if existing:
            stmt = (
                products_table.update()
                .where(products_table.c.id == product.id)
                .values(**product_dict)
            )
        else:
            stmt = products_table.insert().values(**product_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return product

    async def delete(self, product_id: ProductId) -> None:
        """Delete a product (memberships cascade)."""
        stmt = delete(products_table).where(products_table.c.id == product_id)
        await self.session.execute(stmt)
        await self.session.flush()
