"""Product management use cases: list, update, pin, delete."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from whizlist.application.usecase.base import require_owner
from whizlist.domain.error import ValidationError
from whizlist.domain.service import ImageService, ProductListService, ProductService
from whizlist.domain.service.product_service import has_tag, related_tags
from whizlist.domain.value import ListId, ProductId, UserId

from .items import ProductItem, product_to_item


class ListProductsRequest(BaseModel):
    """List products request.

    With list_id, only products in that list (home list or membership).
    With unassigned, only products without a home list.
    With tag, only products carrying that tag (compared case-insensitively);
    the response then also names up to 10 tags seen alongside it.
    """

    user_id: str
    list_id: str | None = None
    unassigned: bool = False
    tag: str | None = None


class ListProductsResponse(BaseModel):
    products: list[ProductItem]
    total: int
    related_tags: list[str] = []


class ListProductsUseCase:
    """Use case for listing a user's products."""

    def __init__(
        self, product_service: ProductService, list_service: ProductListService
    ) -> None:
        self.product_service = product_service
        self.list_service = list_service

    async def execute(self, request: ListProductsRequest) -> ListProductsResponse:
        user_id = UserId(UUID(request.user_id))
        tag = None
        if request.tag is not None:
            tag = request.tag.strip()
            if not tag:
                raise ValidationError("Tag cannot be empty")
        products = await self.product_service.get_products_for_owner(user_id)

        if request.list_id:
            list_id = ListId(UUID(request.list_id))
            product_list = await self.list_service.get_list_by_id(list_id)
            require_owner(product_list.owner_id, user_id, "list", request.list_id)
            member_ids = await self.list_service.get_member_product_ids(list_id)
            products = [
                p for p in products if p.list_id == list_id or p.id in member_ids
            ]
        elif request.unassigned:
            products = [p for p in products if p.list_id is None]
        if tag is not None:
            products = [p for p in products if has_tag(p, tag)]

        # Pinned first, newest first within each group
        products = sorted(products, key=lambda p: p.created_at, reverse=True)
        products = sorted(products, key=lambda p: not p.is_pinned)

        return ListProductsResponse(
            products=[product_to_item(p) for p in products],
            total=len(products),
            related_tags=related_tags(products, tag) if tag is not None else [],
        )


class UpdateProductRequest(BaseModel):
    """Update product request. Omitted fields are left unchanged."""

    product_id: str
    user_id: str
    title: str | None = None
    description: str | None = None
    price: str | None = None
    image_url: str | None = None
    product_url: str | None = None
    tags: list[str] | None = None


class UpdateProductUseCase:
    """Use case for editing product fields."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: UpdateProductRequest) -> ProductItem:
        """Execute update flow.

        Raises:
            NotFoundError: If the product does not exist
            NotAuthorizedError: If the user does not own it
            ValidationError: If a value is invalid
        """
        product_id = ProductId(UUID(request.product_id))
        user_id = UserId(UUID(request.user_id))

        product = await self.product_service.get_product_by_id(product_id)
        require_owner(product.owner_id, user_id, "product", request.product_id)

        changes: dict[str, Any] = request.model_dump(
            exclude={"product_id", "user_id"}, exclude_unset=True
        )
        if not changes:
            return product_to_item(product)

        updated = await self.product_service.update_product(product_id, changes)
        return product_to_item(updated)


class ProductRefRequest(BaseModel):
    """Request naming a product on behalf of a user."""

    product_id: str
    user_id: str


class TogglePinUseCase:
    """Use case for pinning or unpinning a product."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: ProductRefRequest) -> ProductItem:
        product_id = ProductId(UUID(request.product_id))
        product = await self.product_service.get_product_by_id(product_id)
        require_owner(
            product.owner_id, UserId(UUID(request.user_id)), "product", request.product_id
        )
        return product_to_item(await self.product_service.toggle_pin(product_id))


class DeleteProductResponse(BaseModel):
    product_id: str
    deleted: bool
    image_removed: bool = False


class DeleteProductUseCase:
    """Use case for deleting a product.

    Membership rows go with the product. Removing the stored image is
    best-effort.
    """

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        image_service: ImageService,
    ) -> None:
        self.product_service = product_service
        self.list_service = list_service
        self.image_service = image_service

    async def execute(self, request: ProductRefRequest) -> DeleteProductResponse:
        product_id = ProductId(UUID(request.product_id))
        product = await self.product_service.get_product_by_id(product_id)
        require_owner(
            product.owner_id, UserId(UUID(request.user_id)), "product", request.product_id
        )

        for list_id in await self.list_service.get_membership_list_ids(product_id):
            await self.list_service.remove_product(list_id, product_id)
        await self.product_service.delete_product(product_id)

        image_removed = False
        try:
            image_removed = await self.image_service.delete_image(product.image_url)
        except Exception as e:
            logfire.warn(
                "Product image removal failed",
                product_id=request.product_id,
                error=str(e),
            )

        return DeleteProductResponse(
            product_id=request.product_id, deleted=True, image_removed=image_removed
        )
