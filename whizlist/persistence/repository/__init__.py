"""PostgreSQL repository implementations."""

from whizlist.persistence.repository.comment import PostgresCommentRepository
from whizlist.persistence.repository.comment_like import (
    PostgresCommentLikeRepository,
)
from whizlist.persistence.repository.folder import PostgresFolderRepository
from whizlist.persistence.repository.list_membership import (
    PostgresListMembershipRepository,
)
from whizlist.persistence.repository.product import PostgresProductRepository
from whizlist.persistence.repository.product_list import (
    PostgresProductListRepository,
)
from whizlist.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
    "PostgresFolderRepository",
    "PostgresListMembershipRepository",
    "PostgresProductRepository",
    "PostgresProductListRepository",
    "PostgresProfileRepository",
]
