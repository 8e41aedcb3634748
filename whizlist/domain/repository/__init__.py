"""Repository interfaces for the Whizlist domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from whizlist.domain.repository.comment import CommentRepository
from whizlist.domain.repository.comment_like import CommentLikeRepository
from whizlist.domain.repository.folder import FolderRepository
from whizlist.domain.repository.list_membership import ListMembershipRepository
from whizlist.domain.repository.product import ProductRepository
from whizlist.domain.repository.product_list import ProductListRepository
from whizlist.domain.repository.profile import ProfileRepository

__all__ = [
    "CommentRepository",
    "CommentLikeRepository",
    "FolderRepository",
    "ListMembershipRepository",
    "ProductRepository",
    "ProductListRepository",
    "ProfileRepository",
]
