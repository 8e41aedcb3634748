"""Domain model entities for Whizlist."""

from whizlist.domain.model.comment import AnnotatedComment, Comment, CommentNode
from whizlist.domain.model.comment_like import CommentLike
from whizlist.domain.model.folder import Folder
from whizlist.domain.model.product import Product
from whizlist.domain.model.product_list import ListMembership, ProductList
from whizlist.domain.model.profile import Profile

__all__ = [
    "AnnotatedComment",
    "Comment",
    "CommentLike",
    "CommentNode",
    "Folder",
    "ListMembership",
    "Product",
    "ProductList",
    "Profile",
]
