"""List domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.model.product_list import ListMembership, ProductList
from whizlist.domain.repository import (
    ListMembershipRepository,
    ProductListRepository,
    ProductRepository,
)
from whizlist.domain.value import FolderId, ListId, ProductId, UserId

from .base import Service

EDITABLE_FIELDS = frozenset({"name", "description", "is_public", "is_pinned"})


class ProductListService(Service):
    """Domain service for lists and list memberships."""

    def __init__(
        self,
        list_repository: ProductListRepository,
        membership_repository: ListMembershipRepository,
        product_repository: ProductRepository,
    ) -> None:
        """Initialize list service.

        Args:
            list_repository: List repository
            membership_repository: List membership repository
            product_repository: Product repository, used for product counts
        """
        self.list_repository = list_repository
        self.membership_repository = membership_repository
        self.product_repository = product_repository

    async def create_list(
        self,
        owner_id: UserId,
        name: str,
        description: str | None = None,
        is_public: bool = False,
        folder_id: FolderId | None = None,
    ) -> ProductList:
        """Create a list.

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span(
            "product_list_service.create_list", owner_id=str(owner_id), name=name
        ):
            if not name or not name.strip():
                raise ValidationError("List name cannot be empty")

            now = datetime.now()
            product_list = ProductList(
                id=ListId(uuid4()),
                name=name.strip(),
                description=(description or "").strip() or None,
                is_public=is_public,
                is_pinned=False,
                folder_id=folder_id,
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.list_repository.save(product_list)
            logfire.info("List created", list_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def get_list_by_id(self, list_id: ListId) -> ProductList:
        """Get a list by ID.

        Raises:
            NotFoundError: If the list does not exist
        """
        with logfire.span("product_list_service.get_list_by_id", list_id=str(list_id)):
            product_list = await self.list_repository.find_by_id(list_id)
            if not product_list:
                logfire.warn("List not found", list_id=str(list_id))
                raise NotFoundError("List", str(list_id))
            return product_list

    async def get_lists_for_owner(self, owner_id: UserId) -> list[ProductList]:
        """Get all lists of a user with product counts populated.

        A list's product count is the number of distinct products that have
        it as home list or hold a membership row for it.
        """
        with logfire.span(
            "product_list_service.get_lists_for_owner", owner_id=str(owner_id)
        ):
            lists = await self.list_repository.find_by_owner(owner_id)
            if not lists:
                return []

            products = await self.product_repository.find_by_owner(owner_id)
            members = await self.membership_repository.product_ids_by_lists(
                [product_list.id for product_list in lists]
            )

            home: dict[ListId, set[ProductId]] = {}
            for product in products:
                if product.list_id is not None:
                    home.setdefault(product.list_id, set()).add(product.id)

            counted = [
                product_list.model_copy(
                    update={
                        "product_count": len(
                            home.get(product_list.id, set())
                            | members.get(product_list.id, set())
                        )
                    }
                )
                for product_list in lists
            ]
            logfire.info("Lists retrieved", owner_id=str(owner_id), count=len(counted))
            return counted

    async def get_lists_in_folder(self, folder_id: FolderId) -> list[ProductList]:
        """Get the lists filed directly inside a folder (without counts)."""
        return await self.list_repository.find_by_folder(folder_id)

    async def update_list(self, list_id: ListId, changes: dict[str, Any]) -> ProductList:
        """Apply field changes to a list.

        Raises:
            ValidationError: If a field is not editable or a value is invalid
            NotFoundError: If the list does not exist
        """
        with logfire.span(
            "product_list_service.update_list",
            list_id=str(list_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(sorted(unknown))}"
                )
            if "name" in changes:
                name = (changes["name"] or "").strip()
                if not name:
                    raise ValidationError("List name cannot be empty")
                changes = {**changes, "name": name}

            product_list = await self.get_list_by_id(list_id)
            saved = await self.list_repository.save(self._apply(product_list, changes))
            logfire.info("List updated", list_id=str(list_id), fields=sorted(changes))
            return saved

    async def move_to_folder(
        self, list_id: ListId, folder_id: FolderId | None
    ) -> ProductList:
        """Put a list into a folder, or take it out with None."""
        with logfire.span(
            "product_list_service.move_to_folder",
            list_id=str(list_id),
            folder_id=str(folder_id) if folder_id else None,
        ):
            product_list = await self.get_list_by_id(list_id)
            saved = await self.list_repository.save(
                self._apply(product_list, {"folder_id": folder_id})
            )
            logfire.info(
                "List moved to folder",
                list_id=str(list_id),
                folder_id=str(folder_id) if folder_id else None,
            )
            return saved

    async def delete_list(self, list_id: ListId) -> None:
        """Delete a list. Its products stay, unassigned from it.

        Raises:
            NotFoundError: If the list does not exist
        """
        with logfire.span("product_list_service.delete_list", list_id=str(list_id)):
            await self.get_list_by_id(list_id)

            now = datetime.now()
            homed = await self.product_repository.find_by_home_list(list_id)
            for product in homed:
                await self.product_repository.save(
                    product.model_copy(update={"list_id": None, "updated_at": now})
                )
            for membership in await self.membership_repository.find_by_list(list_id):
                await self.membership_repository.remove(list_id, membership.product_id)

            await self.list_repository.delete(list_id)
            logfire.info(
                "List deleted", list_id=str(list_id), unassigned_products=len(homed)
            )

    async def get_membership_list_ids(self, product_id: ProductId) -> set[ListId]:
        """Lists a product currently holds membership rows for."""
        memberships = await self.membership_repository.find_by_product(product_id)
        return {membership.list_id for membership in memberships}

    async def get_member_product_ids(self, list_id: ListId) -> set[ProductId]:
        """Products holding a membership row for a list."""
        memberships = await self.membership_repository.find_by_list(list_id)
        return {membership.product_id for membership in memberships}

    async def add_product(
        self, list_id: ListId, product_id: ProductId
    ) -> ListMembership:
        """Add a product to a list (idempotent)."""
        with logfire.span(
            "product_list_service.add_product",
            list_id=str(list_id),
            product_id=str(product_id),
        ):
            membership = await self.membership_repository.add(list_id, product_id)
            logfire.info(
                "Product added to list",
                list_id=str(list_id),
                product_id=str(product_id),
            )
            return membership

    async def remove_product(self, list_id: ListId, product_id: ProductId) -> bool:
        """Remove a product from a list.

        Returns:
            True if a membership was removed
        """
        with logfire.span(
            "product_list_service.remove_product",
            list_id=str(list_id),
            product_id=str(product_id),
        ):
            removed = await self.membership_repository.remove(list_id, product_id)
            if removed:
                logfire.info(
                    "Product removed from list",
                    list_id=str(list_id),
                    product_id=str(product_id),
                )
            else:
                logfire.info(
                    "No membership to remove",
                    list_id=str(list_id),
                    product_id=str(product_id),
                )
            return removed

    @staticmethod
    def _apply(product_list: ProductList, changes: dict[str, Any]) -> ProductList:
        data = {**product_list.model_dump(), **changes, "updated_at": datetime.now()}
        try:
            return ProductList.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid list data: {e}") from e
