"""Add product use case (fast phase of two-phase creation)."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from whizlist.adapter.error import ExtractionError
from whizlist.application.usecase.base import require_owner
from whizlist.domain.error import ValidationError
from whizlist.domain.service import (
    AssignmentService,
    ContentExtractor,
    ProductListService,
    ProductService,
)
from whizlist.domain.service.search_service import hostname_of
from whizlist.domain.value import ExtractedProduct, ListId, UserId

from .items import ProductItem, product_to_item


class AddProductRequest(BaseModel):
    """Add product request.

    Only product_url is required. Fields given by the caller win over the
    extracted ones. The first selected list becomes the home list.
    """

    user_id: str
    product_url: str
    title: str | None = None
    description: str | None = None
    price: str | None = None
    image_url: str | None = None
    tags: list[str] | None = None
    list_ids: list[str] = Field(default_factory=list)
    new_list_name: str | None = None  # Create this list and select it too


class AddProductResponse(BaseModel):
    """Add product response."""

    product: ProductItem
    list_ids: list[str]  # Lists the product was added to
    created_list_id: str | None = None
    needs_enhancement: bool = True


def validate_product_url(url: str) -> str:
    """Check a product URL is an absolute http(s) URL.

    Raises:
        ValidationError: If the URL is not http(s)
    """
    cleaned = url.strip()
    if not cleaned.lower().startswith(("http://", "https://")):
        raise ValidationError("Product URL must start with http:// or https://")
    if not hostname_of(cleaned):
        raise ValidationError(f"Invalid product URL: {url}")
    return cleaned


class AddProductUseCase:
    """Use case for creating a product with fast extraction.

    The slow extraction tier and image upload run afterwards as a separate
    EnhanceProductUseCase.
    """

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
        content_extractor: ContentExtractor,
    ) -> None:
        """Initialize add product use case.

        Args:
            product_service: Product domain service
            list_service: List domain service
            assignment_service: Assignment service for memberships and inline lists
            content_extractor: Content extraction client
        """
        self.product_service = product_service
        self.list_service = list_service
        self.assignment_service = assignment_service
        self.content_extractor = content_extractor

    async def execute(self, request: AddProductRequest) -> AddProductResponse:
        """Execute add product flow.

        1. Validate the URL before any network call
        2. Create the inline list, if one was named, and merge it into the selection
        3. Run fast extraction (failures are logged, the hostname stands in)
        4. Create the product with the first selected list as home list
        5. Add memberships for every selected list concurrently

        Raises:
            ValidationError: If the URL or the inline list name is invalid
            NotAuthorizedError: If a selected list belongs to someone else
        """
        user_id = UserId(UUID(request.user_id))
        product_url = validate_product_url(request.product_url)

        with logfire.span(
            "add_product", user_id=request.user_id, product_url=product_url
        ):
            selected = [ListId(UUID(lid)) for lid in dict.fromkeys(request.list_ids)]
            for list_id in selected:
                product_list = await self.list_service.get_list_by_id(list_id)
                require_owner(product_list.owner_id, user_id, "list", str(list_id))

            created_list_id: ListId | None = None
            if request.new_list_name is not None:
                new_list = await self.assignment_service.create_inline_list(
                    user_id, request.new_list_name
                )
                created_list_id = new_list.id
                selected.append(new_list.id)

            try:
                extracted = await self.content_extractor.extract_fast(product_url)
            except ExtractionError as e:
                logfire.warn(
                    "Fast extraction failed, using URL fallbacks",
                    product_url=product_url,
                    error=str(e),
                )
                extracted = ExtractedProduct()

            title = (
                request.title
                or extracted.title
                or hostname_of(product_url)
                or product_url
            )
            tags = request.tags if request.tags else extracted.features

            product = await self.product_service.create_product(
                owner_id=user_id,
                title=title,
                product_url=product_url,
                description=request.description or extracted.description or "",
                price=request.price or extracted.price,
                image_url=request.image_url or extracted.image_url,
                tags=tags,
                list_id=selected[0] if selected else None,
            )

            if selected:
                await self.assignment_service.add_to_lists(product.id, selected)

            logfire.info(
                "Product added",
                product_id=str(product.id),
                lists=len(selected),
                extracted=not extracted.is_empty,
            )
            return AddProductResponse(
                product=product_to_item(product),
                list_ids=[str(lid) for lid in selected],
                created_list_id=str(created_list_id) if created_list_id else None,
                needs_enhancement=True,
            )
