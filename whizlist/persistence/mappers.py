"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from whizlist.domain.model import (
    Comment,
    CommentLike,
    Folder,
    ListMembership,
    Product,
    ProductList,
    Profile,
)
from whizlist.domain.value import (
    CommentId,
    CommentLikeId,
    EntityType,
    FolderId,
    ListId,
    ProductId,
    UserId,
)


def _uuid(value: Any) -> Optional[UUID]:
    """Coerce a UUID column value (drivers may return str)."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return profile.model_dump()


def row_to_folder(row: Dict[str, Any]) -> Folder:
    """Convert database row to Folder domain model."""
    parent_id = _uuid(row.get("parent_id"))
    return Folder(
        id=FolderId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        is_public=row["is_public"],
        is_pinned=row["is_pinned"],
        parent_id=FolderId(parent_id) if parent_id else None,
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def folder_to_dict(folder: Folder) -> Dict[str, Any]:
    return folder.model_dump()


def row_to_list(row: Dict[str, Any]) -> ProductList:
    """Convert database row to ProductList domain model.

    product_count is not stored; it stays 0 until the list service fills it.
    """
    folder_id = _uuid(row.get("folder_id"))
    return ProductList(
        id=ListId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        is_public=row["is_public"],
        is_pinned=row["is_pinned"],
        folder_id=FolderId(folder_id) if folder_id else None,
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def list_to_dict(product_list: ProductList) -> Dict[str, Any]:
    """Convert ProductList domain model to database dict.

    Derived product_count is dropped.
    """
    return product_list.model_dump(exclude={"product_count"})


def row_to_product(row: Dict[str, Any]) -> Product:
    """Convert database row to Product domain model."""
    list_id = _uuid(row.get("list_id"))
    return Product(
        id=ProductId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        price=row.get("price"),
        image_url=row.get("image_url"),
        product_url=row["product_url"],
        is_pinned=row["is_pinned"],
        tags=list(row.get("tags") or []),
        list_id=ListId(list_id) if list_id else None,
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def product_to_dict(product: Product) -> Dict[str, Any]:
    return product.model_dump()


def row_to_membership(row: Dict[str, Any]) -> ListMembership:
    """Convert list_products row to ListMembership."""
    return ListMembership(
        list_id=ListId(_uuid(row["list_id"])),
        product_id=ProductId(_uuid(row["product_id"])),
        added_at=row["added_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    product_id = _uuid(row.get("product_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        entity_type=EntityType(row["entity_type"]),
        entity_id=str(row["entity_id"]),
        user_id=UserId(_uuid(row["user_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        product_id=ProductId(product_id) if product_id else None,
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["entity_type"] = comment.entity_type.value
    return data


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    return like.model_dump()
