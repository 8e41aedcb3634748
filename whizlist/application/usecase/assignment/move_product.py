"""Move and copy product use cases."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.application.usecase.base import require_owner
from whizlist.application.usecase.product.items import ProductItem, product_to_item
from whizlist.domain.error import ValidationError
from whizlist.domain.service import AssignmentService, ProductListService, ProductService
from whizlist.domain.value import ListId, ProductId, UserId


class MoveProductRequest(BaseModel):
    """Move product request.

    target_list_id None (and no new_list_name) unassigns the product.
    """

    product_id: str
    user_id: str
    target_list_id: str | None = None
    new_list_name: str | None = None


class CopyProductRequest(BaseModel):
    """Copy product request. Needs a target list or a new list name."""

    product_id: str
    user_id: str
    target_list_id: str | None = None
    new_list_name: str | None = None


class AssignmentResponse(BaseModel):
    product: ProductItem
    created_list_id: str | None = None


async def resolve_target(
    assignment_service: AssignmentService,
    list_service: ProductListService,
    user_id: UserId,
    target_list_id: str | None,
    new_list_name: str | None,
) -> tuple[ListId | None, ListId | None]:
    """Resolve the target list of a move or copy.

    A new list name wins: the list is created and becomes the target.

    Returns:
        Tuple of (target list ID, ID of the list created inline)
    """
    if new_list_name is not None:
        created = await assignment_service.create_inline_list(user_id, new_list_name)
        return created.id, created.id

    if target_list_id is None:
        return None, None

    list_id = ListId(UUID(target_list_id))
    product_list = await list_service.get_list_by_id(list_id)
    require_owner(product_list.owner_id, user_id, "list", target_list_id)
    return list_id, None


class MoveProductUseCase:
    """Use case for moving a product to another home list."""

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> None:
        self.product_service = product_service
        self.list_service = list_service
        self.assignment_service = assignment_service

    async def execute(self, request: MoveProductRequest) -> AssignmentResponse:
        """Execute move flow.

        Raises:
            NotFoundError: If the product or target list does not exist
            NotAuthorizedError: If the user owns neither
            ValidationError: If new_list_name is blank
        """
        product_id = ProductId(UUID(request.product_id))
        user_id = UserId(UUID(request.user_id))

        product = await self.product_service.get_product_by_id(product_id)
        require_owner(product.owner_id, user_id, "product", request.product_id)

        target, created = await resolve_target(
            self.assignment_service,
            self.list_service,
            user_id,
            request.target_list_id,
            request.new_list_name,
        )
        moved = await self.assignment_service.move(product_id, target)
        return AssignmentResponse(
            product=product_to_item(moved),
            created_list_id=str(created) if created else None,
        )


class CopyProductUseCase:
    """Use case for copying a product into a list."""

    def __init__(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> None:
        self.product_service = product_service
        self.list_service = list_service
        self.assignment_service = assignment_service

    async def execute(self, request: CopyProductRequest) -> AssignmentResponse:
        """Execute copy flow.

        Raises:
            ValidationError: If no target is given or new_list_name is blank
            NotFoundError: If the product or target list does not exist
            NotAuthorizedError: If the user owns neither
        """
        product_id = ProductId(UUID(request.product_id))
        user_id = UserId(UUID(request.user_id))

        product = await self.product_service.get_product_by_id(product_id)
        require_owner(product.owner_id, user_id, "product", request.product_id)

        target, created = await resolve_target(
            self.assignment_service,
            self.list_service,
            user_id,
            request.target_list_id,
            request.new_list_name,
        )
        if target is None:
            raise ValidationError("Copy needs a target list")

        copy = await self.assignment_service.copy(product_id, target)
        return AssignmentResponse(
            product=product_to_item(copy),
            created_list_id=str(created) if created else None,
        )
