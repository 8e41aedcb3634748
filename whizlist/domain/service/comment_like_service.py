"""Comment like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from whizlist.domain.error import NotFoundError
from whizlist.domain.model.comment_like import CommentLike
from whizlist.domain.repository import CommentLikeRepository, CommentRepository
from whizlist.domain.value import CommentId, CommentLikeId, UserId

from .base import Service


class CommentLikeService(Service):
    """Domain service for comment likes."""

    def __init__(
        self,
        like_repository: CommentLikeRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize comment like service.

        Args:
            like_repository: Comment like repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Like a comment, or remove the like when it already exists.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            True if the comment is now liked by the user, False otherwise

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_like_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Like on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            existing = await self.like_repository.find_by_user_and_comment(
                user_id, comment_id
            )
            if existing:
                await self.like_repository.delete_by_user_and_comment(
                    user_id, comment_id
                )
                logfire.info(
                    "Comment unliked", comment_id=str(comment_id), user_id=str(user_id)
                )
                return False

            like = CommentLike(
                id=CommentLikeId(uuid4()),
                comment_id=comment_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                # A concurrent request inserted the same like first
                logfire.warn(
                    "Duplicate like attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                return True

            logfire.info(
                "Comment liked", comment_id=str(comment_id), user_id=str(user_id)
            )
            return True

    async def count_likes(self, comment_ids: list[CommentId]) -> dict[CommentId, int]:
        """Count likes for each comment.

        Args:
            comment_ids: Comment IDs to count

        Returns:
            Mapping of every requested comment ID to its like count
        """
        if not comment_ids:
            return {}

        counts = await self.like_repository.count_by_comments(comment_ids)
        return {cid: counts.get(cid, 0) for cid in comment_ids}

    async def get_user_likes_for_comments(
        self, user_id: UserId | None, comment_ids: list[CommentId]
    ) -> dict[CommentId, bool]:
        """Check which comments a user has liked.

        Args:
            user_id: User ID, None for anonymous viewers
            comment_ids: List of comment IDs to check

        Returns:
            Dictionary mapping comment ID to whether the user liked it
        """
        if user_id is None or not comment_ids:
            return {cid: False for cid in comment_ids}

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_comments(
            user_id=user_id,
            comment_ids=comment_ids,
        )
        liked_ids = {like.comment_id for like in likes}
        return {cid: cid in liked_ids for cid in comment_ids}
