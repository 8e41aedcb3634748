"""Comment like entity.

A like is a (comment, user) pair. It is created when absent and deleted
when present; there is no separate "unlike" record.
"""

from datetime import datetime

from pydantic import Field

from whizlist.domain.model.common import DomainModel
from whizlist.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """Like on a comment.

    Business rules:
    - One like per user per comment (enforced by database unique constraint)
    """

    id: CommentLikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
