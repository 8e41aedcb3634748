"""PostgreSQL implementation of Folder repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from whizlist.domain.model import Folder
from whizlist.domain.repository import FolderRepository
from whizlist.domain.value import FolderId, UserId
from whizlist.persistence.mappers import folder_to_dict, row_to_folder
from whizlist.persistence.tables import folders_table


class PostgresFolderRepository(FolderRepository):
    """PostgreSQL implementation of FolderRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, folder_id: FolderId) -> Optional[Folder]:
        stmt = select(folders_table).where(folders_table.c.id == folder_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_folder(row._asdict()) if row else None

    async def find_by_owner(self, owner_id: UserId) -> List[Folder]:
        stmt = (
            select(folders_table)
            .where(folders_table.c.owner_id == owner_id)
            .order_by(desc(folders_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_folder(row._asdict()) for row in result.fetchall()]

    async def save(self, folder: Folder) -> Folder:
        """Save a folder (create or update)."""
        existing = await self.find_by_id(folder.id)
        folder_dict = folder_to_dict(folder)

        if existing:
            stmt = (
                folders_table.update()
                .where(folders_table.c.id == folder.id)
                .values(**folder_dict)
            )
        else:
            stmt = folders_table.insert().values(**folder_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return folder

    async def delete(self, folder_id: FolderId) -> None:
        """Delete a folder; lists.folder_id is cleared by ON DELETE SET NULL."""
        stmt = delete(folders_table).where(folders_table.c.id == folder_id)
        await self.session.execute(stmt)
        await self.session.flush()
