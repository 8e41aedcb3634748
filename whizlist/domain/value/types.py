"""Domain value objects for Whizlist.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, field_validator

from whizlist.domain.value.common import ValueObject


class EntityType(str, Enum):
    """Kind of entity a comment can be attached to."""

    PRODUCT = "product"
    FOLDER = "folder"
    LIST = "list"


class SearchResultType(str, Enum):
    """Category of a search result."""

    PRODUCT = "product"
    LIST = "list"
    FOLDER = "folder"
    TAG = "tag"


class MatchField(str, Enum):
    """Field a search query matched in."""

    TITLE = "title"
    DESCRIPTION = "description"
    TAGS = "tags"
    WEBSITE = "website"
    NAME = "name"
    TAG = "tag"


class AssignmentAction(str, Enum):
    """How a product is put into another list."""

    MOVE = "move"
    COPY = "copy"


class ExtractedProduct(ValueObject):
    """Best-effort product fields returned by the content extraction service.

    Every field is optional; the extraction tiers fill in what they can.
    """

    title: str | None = None
    description: str | None = None
    price: str | None = None
    image_url: str | None = None
    features: list[str] = Field(default_factory=list)

    @field_validator("title", "description", "price", "image_url", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Normalize blank strings to None."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("features", mode="before")
    @classmethod
    def drop_blank_features(cls, v: object) -> object:
        """Keep only non-blank string features."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(f).strip() for f in v if f is not None and str(f).strip()]
        return v

    @property
    def is_empty(self) -> bool:
        """True when extraction produced nothing usable."""
        return not any(
            (self.title, self.description, self.price, self.image_url, self.features)
        )
