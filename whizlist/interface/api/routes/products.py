"""Product routes, including the list assignment flows."""

from uuid import UUID

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from whizlist.application.usecase.assignment import (
    AssignmentResponse,
    CopyProductRequest,
    CopyProductUseCase,
    MoveProductRequest,
    MoveProductUseCase,
    SetProductListsRequest,
    SetProductListsResponse,
    SetProductListsUseCase,
)
from whizlist.application.usecase.product import (
    AddProductRequest,
    AddProductResponse,
    AddProductUseCase,
    DeleteProductResponse,
    DeleteProductUseCase,
    EnhanceProductRequest,
    EnhanceProductUseCase,
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
    ProductItem,
    ProductRefRequest,
    TogglePinUseCase,
    UpdateProductRequest,
    UpdateProductUseCase,
)
from whizlist.domain.service import JWTService
from whizlist.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/products", tags=["products"], route_class=DishkaRoute)


class AddProductAPIRequest(BaseModel):
    """API request for saving a product by URL."""

    product_url: str = Field(min_length=1, max_length=2048)
    title: str | None = Field(default=None, max_length=500)
    description: str | None = None
    price: str | None = None
    image_url: str | None = None
    tags: list[str] | None = None
    list_ids: list[str] = Field(default_factory=list)
    new_list_name: str | None = None


class UpdateProductAPIRequest(BaseModel):
    """API request for editing a product. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, max_length=500)
    description: str | None = None
    price: str | None = None
    image_url: str | None = None
    product_url: str | None = None
    tags: list[str] | None = None


class AssignAPIRequest(BaseModel):
    """API request for a move or copy."""

    list_id: str | None = None
    new_list_name: str | None = None


class SetListsAPIRequest(BaseModel):
    """API request with the full selection of lists for a product."""

    list_ids: list[str] = Field(default_factory=list)
    new_list_name: str | None = None


async def enhance_in_background(container: AsyncContainer, product_id: str) -> None:
    """Run the slow extraction pass in a request scope of its own."""
    async with container() as request_container:
        use_case = await request_container.get(EnhanceProductUseCase)
        result = await use_case.execute(EnhanceProductRequest(product_id=product_id))
    logfire.info(
        "Background enhancement finished",
        product_id=product_id,
        fields=result.updated_fields,
    )


@router.post("", response_model=AddProductResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    request: AddProductAPIRequest,
    http_request: Request,
    background_tasks: BackgroundTasks,
    add_product_use_case: FromDishka[AddProductUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AddProductResponse:
    """Save a product.

    Responds as soon as the fast extraction is done; the deep extraction and
    image upload run after the response is sent.
    """
    user_id = require_user(jwt_service, credentials)
    response = await add_product_use_case.execute(
        AddProductRequest(user_id=str(user_id), **request.model_dump())
    )
    if response.needs_enhancement:
        background_tasks.add_task(
            enhance_in_background,
            http_request.app.state.dishka_container,
            response.product.product_id,
        )
    return response


@router.get("", response_model=ListProductsResponse)
async def list_products(
    list_products_use_case: FromDishka[ListProductsUseCase],
    jwt_service: FromDishka[JWTService],
    list_id: UUID | None = None,
    unassigned: bool = False,
    tag: str | None = None,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListProductsResponse:
    """List the caller's products, pinned first.

    With tag, only products carrying it; related_tags then lists up to 10
    other tags on those products.
    """
    user_id = require_user(jwt_service, credentials)
    return await list_products_use_case.execute(
        ListProductsRequest(
            user_id=str(user_id),
            list_id=str(list_id) if list_id else None,
            unassigned=unassigned,
            tag=tag,
        )
    )


@router.patch("/{product_id}", response_model=ProductItem)
async def update_product(
    product_id: UUID,
    request: UpdateProductAPIRequest,
    update_product_use_case: FromDishka[UpdateProductUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ProductItem:
    """Edit product fields."""
    user_id = require_user(jwt_service, credentials)
    return await update_product_use_case.execute(
        UpdateProductRequest(
            product_id=str(product_id),
            user_id=str(user_id),
            **request.model_dump(exclude_unset=True),
        )
    )


@router.post("/{product_id}/pin", response_model=ProductItem)
async def toggle_pin(
    product_id: UUID,
    toggle_pin_use_case: FromDishka[TogglePinUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ProductItem:
    """Pin or unpin a product."""
    user_id = require_user(jwt_service, credentials)
    return await toggle_pin_use_case.execute(
        ProductRefRequest(product_id=str(product_id), user_id=str(user_id))
    )


@router.delete("/{product_id}", response_model=DeleteProductResponse)
async def delete_product(
    product_id: UUID,
    delete_product_use_case: FromDishka[DeleteProductUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteProductResponse:
    """Delete a product and its stored image."""
    user_id = require_user(jwt_service, credentials)
    return await delete_product_use_case.execute(
        ProductRefRequest(product_id=str(product_id), user_id=str(user_id))
    )


@router.post("/{product_id}/move", response_model=AssignmentResponse)
async def move_product(
    product_id: UUID,
    request: AssignAPIRequest,
    move_product_use_case: FromDishka[MoveProductUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AssignmentResponse:
    """Move a product to another home list, or unassign it."""
    user_id = require_user(jwt_service, credentials)
    return await move_product_use_case.execute(
        MoveProductRequest(
            product_id=str(product_id),
            user_id=str(user_id),
            target_list_id=request.list_id,
            new_list_name=request.new_list_name,
        )
    )


@router.post(
    "/{product_id}/copy",
    response_model=AssignmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def copy_product(
    product_id: UUID,
    request: AssignAPIRequest,
    copy_product_use_case: FromDishka[CopyProductUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AssignmentResponse:
    """Copy a product into a list."""
    user_id = require_user(jwt_service, credentials)
    return await copy_product_use_case.execute(
        CopyProductRequest(
            product_id=str(product_id),
            user_id=str(user_id),
            target_list_id=request.list_id,
            new_list_name=request.new_list_name,
        )
    )


@router.put("/{product_id}/lists", response_model=SetProductListsResponse)
async def set_product_lists(
    product_id: UUID,
    request: SetListsAPIRequest,
    set_product_lists_use_case: FromDishka[SetProductListsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SetProductListsResponse:
    """Replace the set of lists a product belongs to."""
    user_id = require_user(jwt_service, credentials)
    return await set_product_lists_use_case.execute(
        SetProductListsRequest(
            product_id=str(product_id),
            user_id=str(user_id),
            list_ids=request.list_ids,
            new_list_name=request.new_list_name,
        )
    )
