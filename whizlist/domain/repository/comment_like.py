"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from whizlist.domain.model.comment_like import CommentLike
from whizlist.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def find_by_user_and_comment(
        self,
        user_id: UserId,
        comment_id: CommentId,
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like (create).

        Args:
            like: The like to save

        Returns:
            The saved like

        Raises:
            IntegrityError: If the user already liked the comment
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self,
        user_id: UserId,
        comment_id: CommentId,
    ) -> bool:
        """Delete a user's like on a comment.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self,
        comment_ids: Sequence[CommentId],
    ) -> Dict[CommentId, int]:
        """Count likes for multiple comments (batch query).

        Comments without likes may be absent from the result.

        Args:
            comment_ids: Comment IDs to count likes for

        Returns:
            Mapping of comment ID to like count
        """
        pass

    @abstractmethod
    async def find_by_user_and_comments(
        self,
        user_id: UserId,
        comment_ids: Sequence[CommentId],
    ) -> List[CommentLike]:
        """Find a user's likes on multiple comments (batch query).

        Args:
            user_id: The user's ID
            comment_ids: Comment IDs to check

        Returns:
            List of the user's likes on the specified comments
        """
        pass
