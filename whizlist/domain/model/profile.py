"""Profile entity.

Profiles hold the public display data of a user (display name, avatar).
Accounts themselves live in the hosted auth service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from whizlist.domain.model.common import DomainModel
from whizlist.domain.value import UserId


class Profile(DomainModel):
    """Public profile of a user."""

    id: UserId
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
