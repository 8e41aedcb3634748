"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from whizlist.domain.model import AnnotatedComment, Comment, Product, ProductList
from whizlist.domain.value import CommentId, EntityType, ListId, ProductId, UserId

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_comment(
    minutes: int = 0,
    parent_id: CommentId | None = None,
    user_id: UserId | None = None,
    entity_id: str = "entity-1",
    content: str = "A comment",
    comment_id: CommentId | None = None,
) -> Comment:
    """Build a comment created `minutes` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=comment_id or CommentId(uuid4()),
        content=content,
        entity_type=EntityType.LIST,
        entity_id=entity_id,
        user_id=user_id or UserId(uuid4()),
        parent_id=parent_id,
        created_at=created,
        updated_at=created,
    )


def annotate(comment: Comment, like_count: int = 0, liked: bool = False) -> AnnotatedComment:
    return AnnotatedComment(comment=comment, like_count=like_count, is_liked_by_user=liked)


def make_product(
    title: str = "Walnut desk",
    owner_id: UserId | None = None,
    product_url: str = "https://shop.example.com/desk",
    description: str = "",
    price: str | None = None,
    tags: list[str] | None = None,
    is_pinned: bool = False,
    list_id: ListId | None = None,
    image_url: str | None = None,
) -> Product:
    return Product(
        id=ProductId(uuid4()),
        title=title,
        description=description,
        price=price,
        image_url=image_url,
        product_url=product_url,
        is_pinned=is_pinned,
        tags=tags or [],
        list_id=list_id,
        owner_id=owner_id or UserId(uuid4()),
    )


def make_list(
    name: str = "Office",
    owner_id: UserId | None = None,
    description: str | None = None,
    is_pinned: bool = False,
    product_count: int = 0,
    folder_id=None,
) -> ProductList:
    return ProductList(
        id=ListId(uuid4()),
        name=name,
        description=description,
        is_pinned=is_pinned,
        folder_id=folder_id,
        owner_id=owner_id or UserId(uuid4()),
        product_count=product_count,
    )
