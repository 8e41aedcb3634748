"""Folder domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.model.folder import Folder
from whizlist.domain.repository import FolderRepository
from whizlist.domain.value import FolderId, UserId

from .base import Service

EDITABLE_FIELDS = frozenset({"name", "description", "is_public", "is_pinned"})


class FolderService(Service):
    """Domain service for folder operations."""

    def __init__(self, folder_repository: FolderRepository) -> None:
        self.folder_repository = folder_repository

    async def create_folder(
        self,
        owner_id: UserId,
        name: str,
        description: str | None = None,
        is_public: bool = False,
        parent_id: FolderId | None = None,
    ) -> Folder:
        """Create a folder.

        Raises:
            ValidationError: If the name is blank
        """
        with logfire.span(
            "folder_service.create_folder", owner_id=str(owner_id), name=name
        ):
            if not name or not name.strip():
                raise ValidationError("Folder name cannot be empty")

            now = datetime.now()
            folder = Folder(
                id=FolderId(uuid4()),
                name=name.strip(),
                description=(description or "").strip() or None,
                is_public=is_public,
                is_pinned=False,
                parent_id=parent_id,
                owner_id=owner_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.folder_repository.save(folder)
            logfire.info(
                "Folder created", folder_id=str(saved.id), owner_id=str(owner_id)
            )
            return saved

    async def get_folder_by_id(self, folder_id: FolderId) -> Folder:
        """Get a folder by ID.

        Raises:
            NotFoundError: If the folder does not exist
        """
        with logfire.span("folder_service.get_folder_by_id", folder_id=str(folder_id)):
            folder = await self.folder_repository.find_by_id(folder_id)
            if not folder:
                logfire.warn("Folder not found", folder_id=str(folder_id))
                raise NotFoundError("Folder", str(folder_id))
            return folder

    async def get_folders_for_owner(self, owner_id: UserId) -> list[Folder]:
        with logfire.span(
            "folder_service.get_folders_for_owner", owner_id=str(owner_id)
        ):
            folders = await self.folder_repository.find_by_owner(owner_id)
            logfire.info(
                "Folders retrieved", owner_id=str(owner_id), count=len(folders)
            )
            return folders

    async def update_folder(
        self, folder_id: FolderId, changes: dict[str, Any]
    ) -> Folder:
        """Apply field changes to a folder.

        Raises:
            ValidationError: If a field is not editable or a value is invalid
            NotFoundError: If the folder does not exist
        """
        with logfire.span(
            "folder_service.update_folder",
            folder_id=str(folder_id),
            fields=sorted(changes),
        ):
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise ValidationError(
                    f"Fields cannot be updated: {', '.join(sorted(unknown))}"
                )
            if "name" in changes:
                name = (changes["name"] or "").strip()
                if not name:
                    raise ValidationError("Folder name cannot be empty")
                changes = {**changes, "name": name}

            folder = await self.get_folder_by_id(folder_id)
            data = {**folder.model_dump(), **changes, "updated_at": datetime.now()}
            try:
                updated = Folder.model_validate(data)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid folder data: {e}") from e

            saved = await self.folder_repository.save(updated)
            logfire.info(
                "Folder updated", folder_id=str(folder_id), fields=sorted(changes)
            )
            return saved

    async def delete_folder(self, folder_id: FolderId) -> None:
        """Delete a folder. Lists inside it become unfiled.

        Raises:
            NotFoundError: If the folder does not exist
        """
        with logfire.span("folder_service.delete_folder", folder_id=str(folder_id)):
            await self.get_folder_by_id(folder_id)
            await self.folder_repository.delete(folder_id)
            logfire.info("Folder deleted", folder_id=str(folder_id))
