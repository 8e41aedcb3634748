"""Unit tests for EnhanceProductUseCase."""

from uuid import uuid4

import pytest

from whizlist.application.usecase.product import (
    EnhanceProductRequest,
    EnhanceProductUseCase,
)
from whizlist.domain.service import BlobStorage, ContentExtractor, ProductService
from whizlist.domain.value import ExtractedProduct, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PRODUCT_URL = "https://shop.example.com/p/chair"
IMAGE_URL = "https://cdn.example.com/chair.png"


async def _product(unit_env, **fields):
    product_service = await unit_env.get(ProductService)
    return await product_service.create_product(
        owner_id=UserId(uuid4()),
        title=fields.pop("title", "shop.example.com"),
        product_url=PRODUCT_URL,
        **fields,
    )


class TestEnhanceProduct:
    """Tests for the background enhancement phase."""

    @pytest.mark.asyncio
    async def test_deep_fields_and_image_are_applied(self, unit_env):
        # Arrange
        use_case = await unit_env.get(EnhanceProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        storage = await unit_env.get(BlobStorage)
        product = await _product(unit_env)
        extractor.deep_results[PRODUCT_URL] = ExtractedProduct(
            title="Oak chair",
            price="$120",
            image_url=IMAGE_URL,
            features=["oak"],
        )
        storage.remote_files[IMAGE_URL] = (b"chair", "image/png")

        # Act
        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        # Assert
        stored_path = f"{product.owner_id}/{product.id}.png"
        assert response.image_stored is True
        assert response.updated_fields == ["image_url", "price", "tags", "title"]
        assert response.product.title == "Oak chair"
        assert response.product.price == "$120"
        assert response.product.tags == ["oak"]
        assert response.product.image_url == storage.public_url(stored_path)
        assert storage.objects[stored_path] == (b"chair", "image/png")

    @pytest.mark.asyncio
    async def test_existing_tags_are_not_replaced(self, unit_env):
        use_case = await unit_env.get(EnhanceProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        product = await _product(unit_env, tags=["mine"])
        extractor.deep_results[PRODUCT_URL] = ExtractedProduct(features=["theirs"])

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        assert response.product.tags == ["mine"]
        assert response.updated_fields == []

    @pytest.mark.asyncio
    async def test_extraction_failure_keeps_fast_fields(self, unit_env):
        use_case = await unit_env.get(EnhanceProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        product = await _product(unit_env, title="Fast title", price="$5")
        extractor.failing_urls.add(PRODUCT_URL)

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        assert response.updated_fields == []
        assert response.product.title == "Fast title"
        assert response.product.price == "$5"

    @pytest.mark.asyncio
    async def test_image_upload_failure_keeps_external_url(self, unit_env):
        """The external image stays when it cannot be copied into storage."""
        use_case = await unit_env.get(EnhanceProductUseCase)
        extractor = await unit_env.get(ContentExtractor)
        storage = await unit_env.get(BlobStorage)
        product = await _product(unit_env)
        extractor.deep_results[PRODUCT_URL] = ExtractedProduct(image_url=IMAGE_URL)

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        assert response.image_stored is False
        assert response.product.image_url == IMAGE_URL
        assert storage.objects == {}

    @pytest.mark.asyncio
    async def test_fast_image_is_uploaded_without_deep_result(self, unit_env):
        use_case = await unit_env.get(EnhanceProductUseCase)
        storage = await unit_env.get(BlobStorage)
        product = await _product(unit_env, image_url="https://cdn.example.com/a.webp")
        storage.remote_files["https://cdn.example.com/a.webp"] = (b"a", "image/webp")

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        assert response.image_stored is True
        assert response.product.image_url.endswith(f"{product.id}.webp")

    @pytest.mark.asyncio
    async def test_stored_image_is_not_uploaded_again(self, unit_env):
        use_case = await unit_env.get(EnhanceProductUseCase)
        storage = await unit_env.get(BlobStorage)
        stored_url = storage.public_url("someone/existing.jpg")
        product = await _product(unit_env, image_url=stored_url)

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(product.id))
        )

        assert response.image_stored is False
        assert response.product.image_url == stored_url

    @pytest.mark.asyncio
    async def test_missing_product_is_skipped(self, unit_env):
        use_case = await unit_env.get(EnhanceProductUseCase)
        extractor = await unit_env.get(ContentExtractor)

        response = await use_case.execute(
            EnhanceProductRequest(product_id=str(uuid4()))
        )

        assert response.product is None
        assert response.updated_fields == []
        assert extractor.calls == []
