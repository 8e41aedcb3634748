"""Enhance product use case (background phase of two-phase creation)."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from whizlist.domain.service import ContentExtractor, ImageService, ProductService
from whizlist.domain.value import ExtractedProduct, ProductId

from .items import ProductItem, product_to_item


class EnhanceProductRequest(BaseModel):
    """Enhance product request."""

    product_id: str


class EnhanceProductResponse(BaseModel):
    """Enhance product response.

    product is None when the product vanished or nothing could be loaded.
    """

    product: ProductItem | None
    updated_fields: list[str]
    image_stored: bool = False


class EnhanceProductUseCase:
    """Use case for the slow extraction pass and image upload.

    Best-effort throughout: every failure is logged and swallowed, and the
    fields written by the fast phase stay as they are.
    """

    def __init__(
        self,
        product_service: ProductService,
        content_extractor: ContentExtractor,
        image_service: ImageService,
    ) -> None:
        """Initialize enhance product use case.

        Args:
            product_service: Product domain service
            content_extractor: Content extraction client
            image_service: Image storage service
        """
        self.product_service = product_service
        self.content_extractor = content_extractor
        self.image_service = image_service

    async def execute(self, request: EnhanceProductRequest) -> EnhanceProductResponse:
        """Execute enhancement flow.

        1. Deep extraction of the product page
        2. Patch the fields the extraction filled in
        3. Copy the product image into storage and point the product at it
        """
        product_id = ProductId(UUID(request.product_id))

        with logfire.span("enhance_product", product_id=request.product_id):
            try:
                product = await self.product_service.get_product_by_id(product_id)
            except Exception as e:
                logfire.warn(
                    "Enhancement skipped, product unavailable",
                    product_id=request.product_id,
                    error=str(e),
                )
                return EnhanceProductResponse(product=None, updated_fields=[])

            try:
                extracted = await self.content_extractor.extract_deep(
                    product.product_url
                )
            except Exception as e:
                logfire.warn(
                    "Deep extraction failed, keeping fast fields",
                    product_id=request.product_id,
                    error=str(e),
                )
                extracted = ExtractedProduct()

            changes = self._changes(product.tags, extracted)

            image_source = extracted.image_url or product.image_url
            image_stored = False
            if image_source and not self.image_service.is_stored(image_source):
                try:
                    changes["image_url"] = await self.image_service.upload_from_url(
                        product.owner_id, product.id, image_source
                    )
                    image_stored = True
                except Exception as e:
                    logfire.warn(
                        "Image upload failed, keeping external image URL",
                        product_id=request.product_id,
                        image_url=image_source,
                        error=str(e),
                    )

            if not changes:
                logfire.info("Nothing to enhance", product_id=request.product_id)
                return EnhanceProductResponse(
                    product=product_to_item(product), updated_fields=[]
                )

            try:
                updated = await self.product_service.update_product(
                    product_id, changes
                )
            except Exception as e:
                logfire.warn(
                    "Enhancement update failed",
                    product_id=request.product_id,
                    error=str(e),
                )
                return EnhanceProductResponse(
                    product=product_to_item(product), updated_fields=[]
                )

            logfire.info(
                "Product enhanced",
                product_id=request.product_id,
                fields=sorted(changes),
                image_stored=image_stored,
            )
            return EnhanceProductResponse(
                product=product_to_item(updated),
                updated_fields=sorted(changes),
                image_stored=image_stored,
            )

    @staticmethod
    def _changes(current_tags: list[str], extracted: ExtractedProduct) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if extracted.title:
            changes["title"] = extracted.title
        if extracted.description:
            changes["description"] = extracted.description
        if extracted.price:
            changes["price"] = extracted.price
        if extracted.image_url:
            changes["image_url"] = extracted.image_url
        if extracted.features and not current_tags:
            changes["tags"] = extracted.features
        return changes
