"""Search use case."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.domain.service import SearchService
from whizlist.domain.value import SearchResult, UserId


class SearchRequest(BaseModel):
    user_id: str
    query: str


class SearchResponse(BaseModel):
    """Categorized search results, each category already ranked."""

    query: str
    products: list[SearchResult]
    lists: list[SearchResult]
    folders: list[SearchResult]
    tags: list[SearchResult]
    total: int


class SearchUseCase:
    """Use case for searching everything a user owns."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchRequest) -> SearchResponse:
        results = await self.search_service.search_for_owner(
            UserId(UUID(request.user_id)), request.query
        )
        return SearchResponse(
            query=request.query,
            products=results.products,
            lists=results.lists,
            folders=results.folders,
            tags=results.tags,
            total=results.total,
        )
