"""Unit tests for AddProductUseCase."""

from uuid import UUID, uuid4

import pytest

from whizlist.application.usecase.product import (
    AddProductRequest,
    AddProductUseCase,
    validate_product_url,
)
from whizlist.domain.error import NotAuthorizedError, ValidationError
from whizlist.domain.service import (
    ContentExtractor,
    ProductListService,
    ProductService,
)
from whizlist.domain.value import ExtractedProduct, ListId, ProductId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PRODUCT_URL = "https://shop.example.com/p/lamp"


class TestValidateProductUrl:
    def test_accepts_http_and_https(self):
        assert validate_product_url(" https://a.example.com/x ") == "https://a.example.com/x"
        assert validate_product_url("HTTP://a.example.com") == "HTTP://a.example.com"

    @pytest.mark.parametrize("url", ["ftp://a.example.com", "example.com", "", "https://"])
    def test_rejects_other_urls(self, url):
        with pytest.raises(ValidationError):
            validate_product_url(url)


class TestAddProduct:
    """Tests for the fast creation phase."""

    @pytest.mark.asyncio
    async def test_extracted_fields_fill_the_product(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        extractor.fast_results[PRODUCT_URL] = ExtractedProduct(
            title="Desk lamp",
            description="Warm light",
            price="$40",
            image_url="https://cdn.example.com/lamp.png",
            features=["dimmable", "LED"],
        )
        user_id = uuid4()

        # Act
        response = await use_case.execute(
            AddProductRequest(user_id=str(user_id), product_url=PRODUCT_URL)
        )

        # Assert
        product = response.product
        assert product.title == "Desk lamp"
        assert product.description == "Warm light"
        assert product.price == "$40"
        assert product.image_url == "https://cdn.example.com/lamp.png"
        assert product.tags == ["dimmable", "LED"]
        assert product.list_id is None
        assert product.owner_id == str(user_id)
        assert response.list_ids == []
        assert response.needs_enhancement is True
        assert extractor.calls == [("fast", PRODUCT_URL)]

    @pytest.mark.asyncio
    async def test_caller_fields_win_over_extraction(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        extractor.fast_results[PRODUCT_URL] = ExtractedProduct(
            title="Extracted", features=["extracted"]
        )

        response = await use_case.execute(
            AddProductRequest(
                user_id=str(uuid4()),
                product_url=PRODUCT_URL,
                title="Mine",
                tags=["mine"],
            )
        )

        assert response.product.title == "Mine"
        assert response.product.tags == ["mine"]

    @pytest.mark.asyncio
    async def test_extraction_failure_falls_back_to_hostname(self, unit_env):
        """A failing extractor never blocks product creation."""
        use_case = await unit_env.get(AddProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        extractor.failing_urls.add(PRODUCT_URL)

        response = await use_case.execute(
            AddProductRequest(user_id=str(uuid4()), product_url=PRODUCT_URL)
        )

        assert response.product.title == "shop.example.com"
        assert response.product.description == ""
        assert response.product.tags == []

    @pytest.mark.asyncio
    async def test_invalid_url_is_rejected_before_extraction(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        extractor = await unit_env.get(ContentExtractor)

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddProductRequest(user_id=str(uuid4()), product_url="javascript:alert(1)")
            )

        assert extractor.calls == []

    @pytest.mark.asyncio
    async def test_first_selected_list_is_home_and_all_get_memberships(
        self, unit_env
    ):
        # Arrange
        use_case = await unit_env.get(AddProductUseCase)
        list_service = await unit_env.get(ProductListService)
        owner = UserId(uuid4())
        first = await list_service.create_list(owner, "First")
        second = await list_service.create_list(owner, "Second")

        # Act
        response = await use_case.execute(
            AddProductRequest(
                user_id=str(owner),
                product_url=PRODUCT_URL,
                list_ids=[str(first.id), str(second.id)],
            )
        )

        # Assert
        product_id = ProductId(UUID(response.product.product_id))
        assert response.product.list_id == str(first.id)
        assert response.list_ids == [str(first.id), str(second.id)]
        assert await list_service.get_membership_list_ids(product_id) == {
            first.id,
            second.id,
        }

    @pytest.mark.asyncio
    async def test_new_list_is_created_and_selected(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        list_service = await unit_env.get(ProductListService)
        owner = UserId(uuid4())

        response = await use_case.execute(
            AddProductRequest(
                user_id=str(owner),
                product_url=PRODUCT_URL,
                new_list_name="Lighting",
            )
        )

        assert response.created_list_id is not None
        assert response.product.list_id == response.created_list_id
        lists = await list_service.get_lists_for_owner(owner)
        assert [(pl.name, pl.product_count) for pl in lists] == [("Lighting", 1)]

    @pytest.mark.asyncio
    async def test_blank_new_list_name_creates_nothing(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        product_service = await unit_env.get(ProductService)
        owner = UserId(uuid4())

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddProductRequest(
                    user_id=str(owner), product_url=PRODUCT_URL, new_list_name="  "
                )
            )

        assert await product_service.get_products_for_owner(owner) == []

    @pytest.mark.asyncio
    async def test_someone_elses_list_is_rejected(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        list_service = await unit_env.get(ProductListService)
        foreign = await list_service.create_list(UserId(uuid4()), "Not yours")

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                AddProductRequest(
                    user_id=str(uuid4()),
                    product_url=PRODUCT_URL,
                    list_ids=[str(foreign.id)],
                )
            )

    @pytest.mark.asyncio
    async def test_duplicate_list_ids_are_collapsed(self, unit_env):
        use_case = await unit_env.get(AddProductUseCase)
        list_service = await unit_env.get(ProductListService)
        owner = UserId(uuid4())
        only = await list_service.create_list(owner, "Only")

        response = await use_case.execute(
            AddProductRequest(
                user_id=str(owner),
                product_url=PRODUCT_URL,
                list_ids=[str(only.id), str(only.id)],
            )
        )

        assert response.list_ids == [str(only.id)]
        assert ListId(only.id) in await list_service.get_membership_list_ids(
            ProductId(UUID(response.product.product_id))
        )
