"""PostgreSQL implementation of CommentLike repository."""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from whizlist.domain.model import CommentLike
from whizlist.domain.repository import CommentLikeRepository
from whizlist.domain.value import CommentId, UserId
from whizlist.persistence.mappers import comment_like_to_dict, row_to_comment_like
from whizlist.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_and_comment(
        self,
        user_id: UserId,
        comment_id: CommentId,
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like (create)."""
        stmt = insert(comment_likes_table).values(**comment_like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_comment(
        self,
        user_id: UserId,
        comment_id: CommentId,
    ) -> bool:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_comments(
        self,
        comment_ids: Sequence[CommentId],
    ) -> Dict[CommentId, int]:
        """Count likes for multiple comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = (
            select(comment_likes_table.c.comment_id, func.count())
            .where(comment_likes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(row[0]): row[1] for row in result.fetchall()}

    async def find_by_user_and_comments(
        self,
        user_id: UserId,
        comment_ids: Sequence[CommentId],
    ) -> List[CommentLike]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_like(row._asdict()) for row in result.fetchall()]
