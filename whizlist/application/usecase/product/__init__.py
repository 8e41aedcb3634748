"""Product use cases."""

from .add_product import (
    AddProductRequest,
    AddProductResponse,
    AddProductUseCase,
    validate_product_url,
)
from .enhance_product import (
    EnhanceProductRequest,
    EnhanceProductResponse,
    EnhanceProductUseCase,
)
from .items import ProductItem, product_to_item
from .manage_product import (
    DeleteProductResponse,
    DeleteProductUseCase,
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
    ProductRefRequest,
    TogglePinUseCase,
    UpdateProductRequest,
    UpdateProductUseCase,
)

__all__ = [
    "AddProductRequest",
    "AddProductResponse",
    "AddProductUseCase",
    "DeleteProductResponse",
    "DeleteProductUseCase",
    "EnhanceProductRequest",
    "EnhanceProductResponse",
    "EnhanceProductUseCase",
    "ListProductsRequest",
    "ListProductsResponse",
    "ListProductsUseCase",
    "ProductItem",
    "ProductRefRequest",
    "TogglePinUseCase",
    "UpdateProductRequest",
    "UpdateProductUseCase",
    "product_to_item",
    "validate_product_url",
]
