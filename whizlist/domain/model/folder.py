"""Folder entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from whizlist.domain.model.common import DomainModel
from whizlist.domain.value import FolderId, UserId


class Folder(DomainModel):
    """Folder grouping lists. Folders may nest through parent_id."""

    id: FolderId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    is_public: bool = False
    is_pinned: bool = False
    parent_id: Optional[FolderId] = None
    owner_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
