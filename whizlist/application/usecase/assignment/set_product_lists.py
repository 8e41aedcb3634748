"""Bulk list reconciliation use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from whizlist.application.usecase.base import require_owner
from whizlist.domain.service import AssignmentService, ProductListService, ProductService
from whizlist.domain.value import ListId, ProductId, UserId


class SetProductListsRequest(BaseModel):
    """Desired list memberships of a product."""

    product_id: str
    user_id: str
    list_ids: list[str] = Field(default_factory=list)
    new_list_name: str | None = None  # Create this list and select it too


class SetProductListsResponse(BaseModel):
    product_id: str
    list_ids: list[str]
    added: list[str]
    removed: list[str]
    created_list_id: str | None = None


class SetProductListsUseCase:
    """Use case making a product's memberships match a selection."""

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> None:
        self.product_service = product_service
        self.list_service = list_service
        self.assignment_service = assignment_service

    async def execute(self, request: SetProductListsRequest) -> SetProductListsResponse:
        """Execute reconciliation.

        The inline list, if named, is created first and merged into the
        selection within the same submission. Additions and removals then
        run concurrently; the first failure propagates without rollback.

        Raises:
            NotFoundError: If the product or a selected list does not exist
            NotAuthorizedError: If the user does not own them
            ValidationError: If new_list_name is blank
        """
        product_id = ProductId(UUID(request.product_id))
        user_id = UserId(UUID(request.user_id))

        product = await self.product_service.get_product_by_id(product_id)
        require_owner(product.owner_id, user_id, "product", request.product_id)

        selected = {ListId(UUID(lid)) for lid in request.list_ids}
        for list_id in selected:
            product_list = await self.list_service.get_list_by_id(list_id)
            require_owner(product_list.owner_id, user_id, "list", str(list_id))

        created_list_id: ListId | None = None
        if request.new_list_name is not None:
            created = await self.assignment_service.create_inline_list(
                user_id, request.new_list_name
            )
            created_list_id = created.id
            selected.add(created.id)

        outcome = await self.assignment_service.reconcile(product_id, selected)

        return SetProductListsResponse(
            product_id=request.product_id,
            list_ids=sorted(str(lid) for lid in selected),
            added=sorted(str(lid) for lid in outcome.added),
            removed=sorted(str(lid) for lid in outcome.removed),
            created_list_id=str(created_list_id) if created_list_id else None,
        )
