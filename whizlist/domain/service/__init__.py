"""Domain services."""

from .assignment_service import AssignmentService, ReconcileOutcome
from .base import Service
from .comment_like_service import CommentLikeService
from .comment_service import CommentService
from .extraction import ContentExtractor
from .folder_service import FolderService
from .image_service import BlobStorage, ImageService
from .jwt_service import JWTService
from .product_list_service import ProductListService
from .product_service import ProductService
from .search_service import SearchService

__all__ = [
    "AssignmentService",
    "BlobStorage",
    "CommentLikeService",
    "CommentService",
    "ContentExtractor",
    "FolderService",
    "ImageService",
    "JWTService",
    "ProductListService",
    "ProductService",
    "ReconcileOutcome",
    "SearchService",
    "Service",
]
