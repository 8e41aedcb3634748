"""In-memory comment repository for testing."""

from typing import Optional

from whizlist.domain.model.comment import Comment
from whizlist.domain.repository.comment import CommentRepository
from whizlist.domain.value import CommentId, EntityType


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_entity(
        self,
        entity_type: EntityType,
        entity_id: str,
    ) -> list[Comment]:
        """Find all comments on an entity, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.entity_type == entity_type and c.entity_id == entity_id
        ]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, like ON DELETE CASCADE, all replies below it."""
        doomed = {comment_id}
        changed = True
        while changed:
            changed = False
            for c in self._comments.values():
                if c.parent_id in doomed and c.id not in doomed:
                    doomed.add(c.id)
                    changed = True
        for cid in doomed:
            self._comments.pop(cid, None)
