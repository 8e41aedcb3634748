"""Assignment of products to lists.

Covers moving a product to another home list, copying it into a list,
reconciling its list memberships against a selection, and creating a
list on the fly for any of these.
"""

import asyncio
from dataclasses import dataclass
from uuid import uuid4

import logfire

from whizlist.domain.model.product import Product
from whizlist.domain.model.product_list import ProductList
from whizlist.domain.value import ListId, ProductId, UserId

from .base import Service
from .image_service import ImageService
from .product_list_service import ProductListService
from .product_service import ProductService


@dataclass
class ReconcileOutcome:
    """Membership changes applied by a reconciliation."""

    added: set[ListId]
    removed: set[ListId]

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


class AssignmentService(Service):
    """Domain service for product/list assignment flows."""

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        image_service: ImageService,
    ) -> None:
        """Initialize assignment service.

        Args:
            product_service: Product domain service
            list_service: List domain service
            image_service: Image storage service, used when copying products
        """
        self.product_service = product_service
        self.list_service = list_service
        self.image_service = image_service

    async def create_inline_list(self, owner_id: UserId, name: str) -> ProductList:
        """Create a list from a name typed inside an assignment flow.

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span(
            "assignment_service.create_inline_list", owner_id=str(owner_id)
        ):
            return await self.list_service.create_list(owner_id=owner_id, name=name)

    async def move(self, product_id: ProductId, list_id: ListId | None) -> Product:
        """Move a product to another home list (None unassigns it).

        Returns:
            The updated product
        """
        with logfire.span(
            "assignment_service.move",
            product_id=str(product_id),
            list_id=str(list_id) if list_id else None,
        ):
            return await self.product_service.set_home_list(product_id, list_id)

    async def copy(self, product_id: ProductId, target_list_id: ListId) -> Product:
        """Copy a product into a list.

        The copy gets a fresh ID, is unpinned and has the target as home
        list. A stored image is copied to the new product's key; when that
        fails the copy keeps pointing at the source image.

        Returns:
            The new product
        """
        with logfire.span(
            "assignment_service.copy",
            product_id=str(product_id),
            target_list_id=str(target_list_id),
        ):
            source = await self.product_service.get_product_by_id(product_id)
            new_id = ProductId(uuid4())

            image_url = source.image_url
            if source.image_url and self.image_service.is_stored(source.image_url):
                try:
                    copied_url = await self.image_service.copy_image(
                        source.owner_id, source.image_url, new_id
                    )
                    if copied_url:
                        image_url = copied_url
                except Exception as e:
                    logfire.warn(
                        "Image copy failed, keeping source image",
                        product_id=str(product_id),
                        copy_id=str(new_id),
                        error=str(e),
                    )

            return await self.product_service.duplicate_product(
                source, target_list_id, new_id=new_id, image_url=image_url
            )

    async def add_to_lists(
        self, product_id: ProductId, list_ids: list[ListId]
    ) -> None:
        """Add a product to several lists concurrently.

        The first failure propagates; memberships already written stay.
        """
        with logfire.span(
            "assignment_service.add_to_lists",
            product_id=str(product_id),
            count=len(list_ids),
        ):
            await asyncio.gather(
                *(
                    self.list_service.add_product(list_id, product_id)
                    for list_id in dict.fromkeys(list_ids)
                )
            )

    async def reconcile(
        self, product_id: ProductId, selected_list_ids: set[ListId]
    ) -> ReconcileOutcome:
        """Make a product's list memberships equal to a selection.

        Removals (current minus selected) and additions (selected minus
        current) are issued concurrently. The first failure propagates and
        operations that already completed are not rolled back.

        Args:
            product_id: Product ID
            selected_list_ids: Lists the product should be a member of

        Returns:
            The additions and removals that were issued
        """
        with logfire.span(
            "assignment_service.reconcile",
            product_id=str(product_id),
            selected=len(selected_list_ids),
        ):
            await self.product_service.get_product_by_id(product_id)
            current = await self.list_service.get_membership_list_ids(product_id)

            removed = current - selected_list_ids
            added = selected_list_ids - current

            await asyncio.gather(
                *(
                    self.list_service.remove_product(list_id, product_id)
                    for list_id in removed
                ),
                *(
                    self.list_service.add_product(list_id, product_id)
                    for list_id in added
                ),
            )
            logfire.info(
                "Product memberships reconciled",
                product_id=str(product_id),
                added=len(added),
                removed=len(removed),
            )
            return ReconcileOutcome(added=added, removed=removed)
