"""Comment entity and its threaded view.

Comments attach polymorphically to a product, a list or a folder and can
reply to another comment on the same entity. Storage depth is unbounded;
the tree view is rebuilt from flat rows on every fetch.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from whizlist.domain.model.common import DomainModel
from whizlist.domain.model.profile import Profile
from whizlist.domain.value import CommentId, EntityType, ProductId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through parent_id only (None for top-level).
    product_id is a denormalized column kept for product comments that
    predate polymorphic entity support.
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=10000)
    entity_type: EntityType
    entity_id: str = Field(min_length=1)
    user_id: UserId
    parent_id: Optional[CommentId] = None
    product_id: Optional[ProductId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    is_edited: bool = False


class AnnotatedComment(DomainModel):
    """A comment with its like aggregation and author profile.

    like_count and is_liked_by_user are always computed from the like
    records, never read from the comment row.
    """

    comment: Comment
    author: Optional[Profile] = None
    like_count: int = Field(default=0, ge=0)
    is_liked_by_user: bool = False


class CommentNode(DomainModel):
    """A comment in the threaded tree view.

    replies is derived and never persisted.
    """

    comment: Comment
    author: Optional[Profile] = None
    like_count: int = Field(default=0, ge=0)
    is_liked_by_user: bool = False
    replies: list["CommentNode"] = Field(default_factory=list)

    @property
    def id(self) -> CommentId:
        """Shortcut for the comment ID."""
        return self.comment.id


CommentNode.model_rebuild()
