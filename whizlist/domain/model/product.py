"""Product aggregate root.

Products are links saved from around the web, enriched with the fields the
content extraction service could find on the page.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from whizlist.domain.model.common import DomainModel
from whizlist.domain.value import ListId, ProductId, UserId


class Product(DomainModel):
    """Saved product.

    list_id is the product's home list. Additional list memberships are
    tracked separately (see ListMembership).
    """

    id: ProductId
    title: str = Field(min_length=1, max_length=500)
    description: str = ""
    price: Optional[str] = None
    image_url: Optional[str] = None
    product_url: str = Field(min_length=1)
    is_pinned: bool = False
    tags: list[str] = Field(default_factory=list)
    list_id: Optional[ListId] = None
    owner_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: object) -> object:
        """Treat a missing tags array as empty."""
        return [] if v is None else v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: object) -> object:
        """Treat a missing description as empty."""
        return "" if v is None else v
