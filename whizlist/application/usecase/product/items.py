"""Product response item."""

from datetime import datetime

from pydantic import BaseModel

from whizlist.domain.model import Product


class ProductItem(BaseModel):
    """Product item in response."""

    product_id: str
    title: str
    description: str
    price: str | None
    image_url: str | None
    product_url: str
    is_pinned: bool
    tags: list[str]
    list_id: str | None
    owner_id: str
    created_at: datetime
    updated_at: datetime


def product_to_item(product: Product) -> ProductItem:
    return ProductItem(
        product_id=str(product.id),
        title=product.title,
        description=product.description,
        price=product.price,
        image_url=product.image_url,
        product_url=product.product_url,
        is_pinned=product.is_pinned,
        tags=list(product.tags),
        list_id=str(product.list_id) if product.list_id else None,
        owner_id=str(product.owner_id),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
