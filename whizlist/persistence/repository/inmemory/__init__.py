"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .folder import InMemoryFolderRepository
from .list_membership import InMemoryListMembershipRepository
from .product import InMemoryProductRepository
from .product_list import InMemoryProductListRepository
from .profile import InMemoryProfileRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentLikeRepository",
    "InMemoryFolderRepository",
    "InMemoryListMembershipRepository",
    "InMemoryProductRepository",
    "InMemoryProductListRepository",
    "InMemoryProfileRepository",
]
