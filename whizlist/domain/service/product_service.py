"""Product domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.model.product import Product
from whizlist.domain.repository import ProductRepository
from whizlist.domain.value import ListId, ProductId, UserId

from .base import Service

# Fields a caller may change through update_product
EDITABLE_FIELDS = frozenset(
    {"title", "description", "price", "image_url", "product_url", "tags", "is_pinned"}
)


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Strip tags, drop blanks and exact duplicates, keep order."""
    if not tags:
        return []
    return list(dict.fromkeys(tag.strip() for tag in tags if tag and tag.strip()))


def has_tag(product: Product, tag: str) -> bool:
    """Tag lookups ignore case, unlike search dedup."""
    wanted = tag.lower()
    return any(product_tag.lower() == wanted for product_tag in product.tags)


def related_tags(products: list[Product], tag: str, limit: int = 10) -> list[str]:
    """Other tags carried by products, in first-seen order, capped at limit."""
    wanted = tag.lower()
    related: dict[str, None] = {}
    for product in products:
        for product_tag in product.tags:
            if product_tag.lower() != wanted:
                related.setdefault(product_tag)
    return list(related)[:limit]


class ProductService(Service):
    """Domain service for product operations."""

    def __init__(self, product_repository: ProductRepository) -> None:
        """Initialize product service.

        Args:
            product_repository: Product repository
        """
        self.product_repository = product_repository

    async def create_product(
        self,
        owner_id: UserId,
        title: str,
        product_url: str,
        description: str = "",
        price: str | None = None,
        image_url: str | None = None,
        tags: list[str] | None = None,
        list_id: ListId | None = None,
    ) -> Product:
        """Create a product.

        Args:
            owner_id: Owner user ID
            title: Product title
            product_url: Link to the product page
            description: Product description
            price: Display price as scraped
            image_url: Image URL
            tags: Tags
            list_id: Home list

        Returns:
            Created product

        Raises:
            ValidationError: If the title or URL is blank
        """
        with logfire.span(
            "product_service.create_product",
            owner_id=str(owner_id),
            product_url=product_url,
        ):
            if not title.strip():
                raise ValidationError("Product title cannot be empty")
            if not product_url.strip():
                raise ValidationError("Product URL cannot be empty")

            now = datetime.now()
            product = Product(
                id=ProductId(uuid4()),
                title=title.strip(),
                description=description or "",
                price=price,
                image_url=image_url,
                product_url=product_url.strip(),
                is_pinned=False,
                tags=normalize_tags(tags),
                list_id=list_id,
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.product_repository.save(product)
            logfire.info(
                "Product created",
                product_id=str(saved.id),
                owner_id=str(owner_id),
                list_id=str(list_id) if list_id else None,
            )
            return saved

    async def get_product_by_id(self, product_id: ProductId) -> Product:
        """Get a product by ID.

        Raises:
            NotFoundError: If the product does not exist
        """
        with logfire.span(
            "product_service.get_product_by_id", product_id=str(product_id)
        ):
            product = await self.product_repository.find_by_id(product_id)
            if not product:
                logfire.warn("Product not found", product_id=str(product_id))
                raise NotFoundError("Product", str(product_id))
            return product

    async def get_products_for_owner(self, owner_id: UserId) -> list[Product]:
        """Get all products of a user, newest first."""
        with logfire.span(
            "product_service.get_products_for_owner", owner_id=str(owner_id)
        ):
            products = await self.product_repository.find_by_owner(owner_id)
            logfire.info(
                "Products retrieved", owner_id=str(owner_id), count=len(products)
            )
            return products

    async def update_product(
        self, product_id: ProductId, changes: dict[str, Any]
    ) -> Product:
        """Apply field changes to a product.

        Args:
            product_id: Product ID
            changes: Field name to new value, restricted to EDITABLE_FIELDS

        Returns:
            Updated product

        Raises:
            ValidationError: If a field is not editable or a value is invalid
            NotFoundError: If the product does not exist
        """
        with logfire.span(
            "product_service.update_product",
            product_id=str(product_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(sorted(unknown))}"
                )

            product = await self.get_product_by_id(product_id)
            if "tags" in changes:
                changes = {**changes, "tags": normalize_tags(changes["tags"])}

            updated = self._apply(product, changes)
            saved = await self.product_repository.save(updated)
            logfire.info(
                "Product updated", product_id=str(product_id), fields=sorted(changes)
            )
            return saved

    async def toggle_pin(self, product_id: ProductId) -> Product:
        """Flip the pinned flag of a product."""
        with logfire.span("product_service.toggle_pin", product_id=str(product_id)):
            product = await self.get_product_by_id(product_id)
            saved = await self.product_repository.save(
                self._apply(product, {"is_pinned": not product.is_pinned})
            )
            logfire.info(
                "Product pin toggled",
                product_id=str(product_id),
                is_pinned=saved.is_pinned,
            )
            return saved

    async def set_home_list(
        self, product_id: ProductId, list_id: ListId | None
    ) -> Product:
        """Change the home list of a product (None unassigns it).

        Returns:
            Updated product
        """
        with logfire.span(
            "product_service.set_home_list",
            product_id=str(product_id),
            list_id=str(list_id) if list_id else None,
        ):
            product = await self.get_product_by_id(product_id)
            saved = await self.product_repository.save(
                self._apply(product, {"list_id": list_id})
            )
            logfire.info(
                "Product home list changed",
                product_id=str(product_id),
                list_id=str(list_id) if list_id else None,
            )
            return saved

    async def duplicate_product(
        self,
        source: Product,
        target_list_id: ListId,
        new_id: ProductId | None = None,
        image_url: str | None = None,
    ) -> Product:
        """Create a copy of a product in another list.

        All fields are duplicated except the ID, the pinned flag (always
        False) and the home list (the target).

        Args:
            source: Product to copy
            target_list_id: Home list of the copy
            new_id: ID for the copy (generated when omitted)
            image_url: Image URL for the copy (source image when omitted)

        Returns:
            Created copy
        """
        with logfire.span(
            "product_service.duplicate_product",
            source_id=str(source.id),
            target_list_id=str(target_list_id),
        ):
            now = datetime.now()
            copy = source.model_copy(
                update={
                    "id": new_id or ProductId(uuid4()),
                    "is_pinned": False,
                    "list_id": target_list_id,
                    "image_url": image_url or source.image_url,
                    "tags": list(source.tags),
                    "created_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.product_repository.save(copy)
            logfire.info(
                "Product duplicated",
                source_id=str(source.id),
                copy_id=str(saved.id),
                target_list_id=str(target_list_id),
            )
            return saved

    async def delete_product(self, product_id: ProductId) -> Product:
        """Delete a product.

        Returns:
            The deleted product, so callers can clean up its image

        Raises:
            NotFoundError: If the product does not exist
        """
        with logfire.span(
            "product_service.delete_product", product_id=str(product_id)
        ):
            product = await self.get_product_by_id(product_id)
            await self.product_repository.delete(product_id)
            logfire.info("Product deleted", product_id=str(product_id))
            return product

    @staticmethod
    def _apply(product: Product, changes: dict[str, Any]) -> Product:
        data = {**product.model_dump(), **changes, "updated_at": datetime.now()}
        try:
            return Product.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid product data: {e}") from e
