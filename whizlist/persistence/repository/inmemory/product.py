"""In-memory product repository for testing."""

from typing import Optional

from whizlist.domain.model.product import Product
from whizlist.domain.repository.product import ProductRepository
from whizlist.domain.value import ListId, ProductId, UserId


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository for testing."""

    def __init__(self) -> None:
        self._products: dict[ProductId, Product] = {}

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        return self._products.get(product_id)

    async def find_by_owner(self, owner_id: UserId) -> list[Product]:
        products = [p for p in self._products.values() if p.owner_id == owner_id]
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    async def find_by_home_list(self, list_id: ListId) -> list[Product]:
        products = [p for p in self._products.values() if p.list_id == list_id]
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    async def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    async def delete(self, product_id: ProductId) -> None:
        self._products.pop(product_id, None)
