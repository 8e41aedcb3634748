"""List entity.

Named ProductList to avoid shadowing the builtin.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from whizlist.domain.model.common import DomainModel
from whizlist.domain.value import FolderId, ListId, ProductId, UserId


class ProductList(DomainModel):
    """A user-curated list of products, optionally inside a folder.

    product_count is derived by the list service and is 0 when the list
    was loaded without counts.
    """

    id: ListId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    is_public: bool = False
    is_pinned: bool = False
    folder_id: Optional[FolderId] = None
    owner_id: UserId
    product_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class ListMembership(DomainModel):
    """Association of a product with a list (list_products row)."""

    list_id: ListId
    product_id: ProductId
    added_at: datetime = Field(default_factory=datetime.now)
