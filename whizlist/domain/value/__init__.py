"""Domain value objects for Whizlist."""

from whizlist.domain.value.identifiers import (
    CommentId,
    CommentLikeId,
    FolderId,
    ListId,
    ProductId,
    UserId,
)
from whizlist.domain.value.search import SearchResult, SearchResults
from whizlist.domain.value.types import (
    AssignmentAction,
    EntityType,
    ExtractedProduct,
    MatchField,
    SearchResultType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProductId",
    "ListId",
    "FolderId",
    "CommentId",
    "CommentLikeId",
    # Types
    "AssignmentAction",
    "EntityType",
    "ExtractedProduct",
    "MatchField",
    "SearchResultType",
    # Search
    "SearchResult",
    "SearchResults",
]
