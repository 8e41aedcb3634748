"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from whizlist.domain.model.comment import Comment
from whizlist.domain.value import CommentId, EntityType


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_entity(
        self,
        entity_type: EntityType,
        entity_id: str,
    ) -> List[Comment]:
        """Find all comments attached to an entity.

        Comments are returned flat, ordered by creation time. Threading
        is rebuilt by the caller.

        Args:
            entity_type: Kind of entity (product, list or folder)
            entity_id: ID of the entity

        Returns:
            List of comments on the entity
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply below it.

        Args:
            comment_id: The comment ID to delete
        """
        pass
