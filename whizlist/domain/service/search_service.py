"""Search across a user's products, lists, folders and tags.

Matching is a case-insensitive substring test on the trimmed query. The
ranking function is pure so it can run both server-side and over the
session workspace cache.
"""

from typing import Optional, Sequence
from urllib.parse import urlparse

import logfire

from whizlist.domain.model.folder import Folder
from whizlist.domain.model.product import Product
from whizlist.domain.model.product_list import ProductList
from whizlist.domain.value import (
    MatchField,
    SearchResult,
    SearchResults,
    SearchResultType,
    UserId,
)

from .base import Service
from .folder_service import FolderService
from .product_list_service import ProductListService
from .product_service import ProductService


def hostname_of(url: str) -> Optional[str]:
    """Hostname of a URL, None when it cannot be parsed."""
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def _ranked(results: list[SearchResult]) -> list[SearchResult]:
    # Pinned first, then case-insensitive alphabetical
    return sorted(results, key=lambda r: (not r.is_pinned, r.title.casefold()))


def _match_product(product: Product, term: str) -> list[MatchField]:
    matched: list[MatchField] = []
    if term in product.title.lower():
        matched.append(MatchField.TITLE)
    if product.description and term in product.description.lower():
        matched.append(MatchField.DESCRIPTION)
    if any(term in tag.lower() for tag in product.tags or []):
        matched.append(MatchField.TAGS)
    hostname = hostname_of(product.product_url)
    if hostname and term in hostname.lower():
        matched.append(MatchField.WEBSITE)
    return matched


def _match_named(name: str, description: Optional[str], term: str) -> list[MatchField]:
    matched: list[MatchField] = []
    if term in name.lower():
        matched.append(MatchField.NAME)
    if description and term in description.lower():
        matched.append(MatchField.DESCRIPTION)
    return matched


def search(
    query: str,
    products: Sequence[Product],
    lists: Sequence[ProductList],
    folders: Sequence[Folder],
) -> SearchResults:
    """Categorized, ranked search.

    Args:
        query: Raw query text; blank queries match nothing
        products: Products to search
        lists: Lists to search, with product_count populated
        folders: Folders to search

    Returns:
        Results per category; products, lists and folders are ranked
        pinned first then by title, tags by descending usage
    """
    term = query.strip().lower()
    if not term:
        return SearchResults()

    product_results: list[SearchResult] = []
    for product in products:
        matched = _match_product(product, term)
        if matched:
            product_results.append(
                SearchResult(
                    id=str(product.id),
                    type=SearchResultType.PRODUCT,
                    title=product.title,
                    subtitle=product.price or None,
                    description=product.description or None,
                    url=product.product_url,
                    is_pinned=product.is_pinned,
                    matched_in=matched,
                )
            )

    list_results: list[SearchResult] = []
    for product_list in lists:
        matched = _match_named(product_list.name, product_list.description, term)
        if matched:
            list_results.append(
                SearchResult(
                    id=str(product_list.id),
                    type=SearchResultType.LIST,
                    title=product_list.name,
                    description=product_list.description or None,
                    is_pinned=product_list.is_pinned,
                    item_count=product_list.product_count,
                    matched_in=matched,
                )
            )

    folder_results: list[SearchResult] = []
    for folder in folders:
        matched = _match_named(folder.name, folder.description, term)
        if matched:
            folder_results.append(
                SearchResult(
                    id=str(folder.id),
                    type=SearchResultType.FOLDER,
                    title=folder.name,
                    description=folder.description or None,
                    is_pinned=folder.is_pinned,
                    item_count=sum(1 for pl in lists if pl.folder_id == folder.id),
                    matched_in=matched,
                )
            )

    # Distinct tag strings in first-seen order; usage counted case-insensitively
    matching_tags: dict[str, None] = {}
    usage: dict[str, int] = {}
    for product in products:
        folded = {tag.lower() for tag in product.tags or []}
        for key in folded:
            usage[key] = usage.get(key, 0) + 1
        for tag in product.tags or []:
            if term in tag.lower():
                matching_tags.setdefault(tag, None)

    tag_results = [
        SearchResult(
            id=tag,
            type=SearchResultType.TAG,
            title=tag,
            item_count=usage.get(tag.lower(), 0),
            matched_in=[MatchField.TAG],
        )
        for tag in matching_tags
    ]
    tag_results.sort(key=lambda r: -(r.item_count or 0))

    return SearchResults(
        products=_ranked(product_results),
        lists=_ranked(list_results),
        folders=_ranked(folder_results),
        tags=tag_results,
    )


class SearchService(Service):
    """Domain service running searches over a user's stored entities."""

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        folder_service: FolderService,
    ) -> None:
        """Initialize search service.

        Args:
            product_service: Product domain service
            list_service: List domain service
            folder_service: Folder domain service
        """
        self.product_service = product_service
        self.list_service = list_service
        self.folder_service = folder_service

    async def search_for_owner(self, owner_id: UserId, query: str) -> SearchResults:
        """Search everything a user owns.

        Args:
            owner_id: The user whose entities are searched
            query: Raw query text

        Returns:
            Categorized results
        """
        with logfire.span(
            "search_service.search_for_owner", owner_id=str(owner_id), query=query
        ):
            if not query.strip():
                return SearchResults()

            products = await self.product_service.get_products_for_owner(owner_id)
            lists = await self.list_service.get_lists_for_owner(owner_id)
            folders = await self.folder_service.get_folders_for_owner(owner_id)

            results = search(query, products, lists, folders)
            logfire.info(
                "Search completed",
                owner_id=str(owner_id),
                products=len(results.products),
                lists=len(results.lists),
                folders=len(results.folders),
                tags=len(results.tags),
            )
            return results
