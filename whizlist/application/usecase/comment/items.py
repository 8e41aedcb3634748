"""Comment response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel, Field

from whizlist.domain.model import Comment, CommentNode, Profile


class AuthorItem(BaseModel):
    """Comment author."""

    user_id: str
    full_name: str | None
    avatar_url: str | None


class CommentItem(BaseModel):
    """Comment item in response, with nested replies in thread views."""

    comment_id: str
    entity_type: str
    entity_id: str
    user_id: str
    parent_id: str | None
    content: str
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    like_count: int = 0
    is_liked_by_user: bool = False
    author: AuthorItem | None = None
    replies: list["CommentItem"] = Field(default_factory=list)


def author_to_item(profile: Profile | None) -> AuthorItem | None:
    if profile is None:
        return None
    return AuthorItem(
        user_id=str(profile.id),
        full_name=profile.full_name,
        avatar_url=profile.avatar_url,
    )


def comment_to_item(comment: Comment) -> CommentItem:
    """Flat item for a bare comment (no likes, no replies)."""
    return CommentItem(
        comment_id=str(comment.id),
        entity_type=comment.entity_type.value,
        entity_id=comment.entity_id,
        user_id=str(comment.user_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        content=comment.content,
        is_edited=comment.is_edited,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def node_to_item(node: CommentNode) -> CommentItem:
    """Item for a thread node, replies included."""
    item = comment_to_item(node.comment)
    return item.model_copy(
        update={
            "like_count": node.like_count,
            "is_liked_by_user": node.is_liked_by_user,
            "author": author_to_item(node.author),
            "replies": [node_to_item(reply) for reply in node.replies],
        }
    )
