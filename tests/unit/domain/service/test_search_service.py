"""Unit tests for search ranking."""

from uuid import uuid4

import pytest

from whizlist.domain.model import Folder
from whizlist.domain.service import ProductListService, ProductService, SearchService
from whizlist.domain.service.search_service import hostname_of, search
from whizlist.domain.value import (
    FolderId,
    MatchField,
    SearchResultType,
    UserId,
)
from tests.conftest import make_list, make_product
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_folder(name: str, description: str | None = None, is_pinned: bool = False):
    return Folder(
        id=FolderId(uuid4()),
        name=name,
        description=description,
        is_pinned=is_pinned,
        owner_id=UserId(uuid4()),
    )


class TestSearch:
    """Tests for the pure search function."""

    def test_blank_query_matches_nothing(self):
        products = [make_product(title="Desk")]

        results = search("   ", products, [], [])

        assert results.is_empty
        assert results.total == 0

    def test_matching_is_case_insensitive_and_trimmed(self):
        desk = make_product(title="Walnut DESK")

        results = search("  desk ", [desk], [], [])

        assert [r.id for r in results.products] == [str(desk.id)]
        assert results.products[0].matched_in == [MatchField.TITLE]

    def test_product_match_provenance(self):
        product = make_product(
            title="Lamp",
            description="A lamp for the lamp lover",
            tags=["lamp-shade"],
            product_url="https://lamp.example.com/item",
        )

        results = search("lamp", [product], [], [])

        assert results.products[0].matched_in == [
            MatchField.TITLE,
            MatchField.DESCRIPTION,
            MatchField.TAGS,
            MatchField.WEBSITE,
        ]

    def test_website_matches_hostname_only(self):
        product = make_product(
            title="Chair", product_url="https://shop.example.com/chairs/ikea-chair"
        )

        assert search("ikea", [product], [], []).products == []
        assert search("shop.example", [product], [], []).products[0].matched_in == [
            MatchField.WEBSITE
        ]

    def test_product_result_fields(self):
        product = make_product(
            title="Kettle",
            description="Boils water",
            price="$25",
            product_url="https://kettles.example.com/k1",
        )

        result = search("kettle", [product], [], []).products[0]

        assert result.type == SearchResultType.PRODUCT
        assert result.title == "Kettle"
        assert result.subtitle == "$25"
        assert result.description == "Boils water"
        assert result.url == "https://kettles.example.com/k1"

    def test_pinned_first_then_alphabetical(self):
        zebra = make_product(title="zebra mug", is_pinned=True)
        apple = make_product(title="Apple mug")
        banana = make_product(title="banana mug")

        results = search("mug", [banana, zebra, apple], [], [])

        assert [r.title for r in results.products] == [
            "zebra mug",
            "Apple mug",
            "banana mug",
        ]

    def test_lists_and_folders_match_name_and_description(self):
        office = make_list(name="Office", description="Desk things", product_count=3)
        kitchen = make_list(name="Kitchen", description="Cooking")
        folder = make_folder(name="Home office")
        office = office.model_copy(update={"folder_id": folder.id})

        results = search("office", [], [office, kitchen], [folder])

        assert [r.id for r in results.lists] == [str(office.id)]
        assert results.lists[0].item_count == 3
        assert results.lists[0].matched_in == [MatchField.NAME]
        assert [r.id for r in results.folders] == [str(folder.id)]
        assert results.folders[0].item_count == 1

        desk_results = search("desk", [], [office, kitchen], [folder])
        assert desk_results.lists[0].matched_in == [MatchField.DESCRIPTION]

    def test_tags_are_deduplicated_and_counted(self):
        products = [
            make_product(title="A", tags=["Wood", "oak"]),
            make_product(title="B", tags=["wood"]),
            make_product(title="C", tags=["wood", "WOOD"]),
            make_product(title="D", tags=["woodwork"]),
        ]

        results = search("wood", products, [], [])

        tags = {(r.title, r.item_count) for r in results.tags}
        assert tags == {("Wood", 3), ("wood", 3), ("WOOD", 3), ("woodwork", 1)}
        assert results.tags[-1].title == "woodwork"
        assert all(r.type == SearchResultType.TAG for r in results.tags)
        assert all(r.matched_in == [MatchField.TAG] for r in results.tags)

    def test_tags_sorted_by_usage(self):
        products = [
            make_product(title="A", tags=["rare-metal"]),
            make_product(title="B", tags=["metal"]),
            make_product(title="C", tags=["metal"]),
        ]

        results = search("metal", products, [], [])

        assert [r.title for r in results.tags] == ["metal", "rare-metal"]

    def test_products_without_tags_are_searchable(self):
        product = make_product(title="Plain").model_copy(update={"tags": []})

        results = search("plain", [product], [], [])

        assert len(results.products) == 1
        assert results.tags == []

    def test_flat_navigation_order(self):
        product = make_product(title="Garden hose")
        garden_list = make_list(name="Garden")
        folder = make_folder(name="Garden stuff")
        tagged = make_product(title="Rake", tags=["garden"])

        results = search("garden", [product, tagged], [garden_list], [folder])

        types = [r.type for r in results.all_results]
        assert types == [
            SearchResultType.PRODUCT,
            SearchResultType.PRODUCT,
            SearchResultType.LIST,
            SearchResultType.FOLDER,
            SearchResultType.TAG,
        ]
        assert results.index_of(results.tags[0]) == 4
        assert results.at(10) is None


class TestHostname:
    def test_hostname_of_url(self):
        assert hostname_of("https://Shop.Example.com:8080/x") == "shop.example.com"

    def test_hostname_of_garbage(self):
        assert hostname_of("not a url") is None


class TestSearchService:
    """Tests for SearchService over stored entities."""

    @pytest.mark.asyncio
    async def test_search_for_owner_only_sees_own_entities(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        product_service = await unit_env.get(ProductService)
        list_service = await unit_env.get(ProductListService)
        owner = UserId(uuid4())
        stranger = UserId(uuid4())

        own_list = await list_service.create_list(owner, "Camping gear")
        await product_service.create_product(
            owner, "Camping stove", "https://example.com/stove", list_id=own_list.id
        )
        await product_service.create_product(
            stranger, "Camping tent", "https://example.com/tent"
        )

        # Act
        results = await search_service.search_for_owner(owner, "camping")

        # Assert
        assert [r.title for r in results.products] == ["Camping stove"]
        assert [r.title for r in results.lists] == ["Camping gear"]
        assert results.lists[0].item_count == 1

    @pytest.mark.asyncio
    async def test_blank_query_returns_empty(self, unit_env):
        search_service = await unit_env.get(SearchService)

        results = await search_service.search_for_owner(UserId(uuid4()), " ")

        assert results.is_empty
