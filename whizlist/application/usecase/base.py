"""Shared use case helpers."""

from uuid import UUID

from whizlist.domain.error import NotAuthorizedError


def require_owner(owner_id: UUID, user_id: UUID, resource: str, resource_id: str) -> None:
    """Raise NotAuthorizedError unless the user owns the resource."""
    if owner_id != user_id:
        raise NotAuthorizedError(resource, resource_id, str(user_id))
