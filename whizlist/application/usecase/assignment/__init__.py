"""Product-to-list assignment use cases."""

from .move_product import (
    AssignmentResponse,
    CopyProductRequest,
    CopyProductUseCase,
    MoveProductRequest,
    MoveProductUseCase,
)
from .set_product_lists import (
    SetProductListsRequest,
    SetProductListsResponse,
    SetProductListsUseCase,
)

__all__ = [
    "AssignmentResponse",
    "CopyProductRequest",
    "CopyProductUseCase",
    "MoveProductRequest",
    "MoveProductUseCase",
    "SetProductListsRequest",
    "SetProductListsResponse",
    "SetProductListsUseCase",
]
