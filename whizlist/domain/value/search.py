"""Search result value objects."""

from typing import Optional

from pydantic import Field

from whizlist.domain.value.common import ValueObject
from whizlist.domain.value.types import MatchField, SearchResultType


class SearchResult(ValueObject):
    """A single categorized search hit.

    id is the entity UUID as a string, or the tag text for tag results.
    """

    id: str
    type: SearchResultType
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    is_pinned: bool = False
    item_count: Optional[int] = None
    matched_in: list[MatchField] = Field(default_factory=list)


class SearchResults(ValueObject):
    """Search hits grouped by category, each category already ranked."""

    products: list[SearchResult] = Field(default_factory=list)
    lists: list[SearchResult] = Field(default_factory=list)
    folders: list[SearchResult] = Field(default_factory=list)
    tags: list[SearchResult] = Field(default_factory=list)

    @property
    def all_results(self) -> list[SearchResult]:
        """Flat navigation order: products, lists, folders, then tags."""
        return [*self.products, *self.lists, *self.folders, *self.tags]

    @property
    def total(self) -> int:
        return len(self.products) + len(self.lists) + len(self.folders) + len(self.tags)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def index_of(self, result: SearchResult) -> int:
        """Position of a result in the flat navigation order.

        Returns:
            The index, or -1 when the result is not part of this result set
        """
        for index, candidate in enumerate(self.all_results):
            if candidate.type == result.type and candidate.id == result.id:
                return index
        return -1

    def at(self, index: int) -> Optional[SearchResult]:
        """Result at a flat navigation index, None when out of range."""
        results = self.all_results
        if 0 <= index < len(results):
            return results[index]
        return None
