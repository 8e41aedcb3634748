"""Unit tests for folder use cases."""

from uuid import uuid4

import pytest

from whizlist.application.usecase.collection import (
    CreateFolderRequest,
    CreateFolderUseCase,
    CreateListRequest,
    CreateListUseCase,
    DeleteFolderRequest,
    DeleteFolderUseCase,
    GetFoldersRequest,
    GetFoldersUseCase,
    GetListsRequest,
    GetListsUseCase,
    UpdateFolderRequest,
    UpdateFolderUseCase,
)
from whizlist.domain.error import NotAuthorizedError, ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _folder(unit_env, owner, name="Projects", parent_id=None):
    use_case = await unit_env.get(CreateFolderUseCase)
    return await use_case.execute(
        CreateFolderRequest(user_id=str(owner), name=name, parent_id=parent_id)
    )


async def _list(unit_env, owner, folder_id, name="List"):
    use_case = await unit_env.get(CreateListUseCase)
    return await use_case.execute(
        CreateListRequest(user_id=str(owner), name=name, folder_id=folder_id)
    )


class TestCreateFolder:
    @pytest.mark.asyncio
    async def test_nested_folder(self, unit_env):
        owner = uuid4()
        parent = await _folder(unit_env, owner)

        child = await _folder(unit_env, owner, "Child", parent_id=parent.folder_id)

        assert child.parent_id == parent.folder_id

    @pytest.mark.asyncio
    async def test_foreign_parent_is_rejected(self, unit_env):
        parent = await _folder(unit_env, uuid4())

        with pytest.raises(NotAuthorizedError):
            await _folder(unit_env, uuid4(), "Child", parent_id=parent.folder_id)

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, unit_env):
        with pytest.raises(ValidationError):
            await _folder(unit_env, uuid4(), "")


class TestGetFolders:
    @pytest.mark.asyncio
    async def test_folders_carry_list_counts(self, unit_env):
        use_case = await unit_env.get(GetFoldersUseCase)
        owner = uuid4()
        full = await _folder(unit_env, owner, "Full")
        empty = await _folder(unit_env, owner, "Empty")
        await _list(unit_env, owner, full.folder_id, "One")
        await _list(unit_env, owner, full.folder_id, "Two")

        response = await use_case.execute(GetFoldersRequest(user_id=str(owner)))

        counts = {item.folder_id: item.list_count for item in response.folders}
        assert counts == {full.folder_id: 2, empty.folder_id: 0}
        assert response.total == 2


class TestUpdateFolder:
    @pytest.mark.asyncio
    async def test_pin_and_rename(self, unit_env):
        use_case = await unit_env.get(UpdateFolderUseCase)
        owner = uuid4()
        folder = await _folder(unit_env, owner)

        item = await use_case.execute(
            UpdateFolderRequest(
                folder_id=folder.folder_id,
                user_id=str(owner),
                name="Archive",
                is_pinned=True,
            )
        )

        assert item.name == "Archive"
        assert item.is_pinned is True

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        use_case = await unit_env.get(UpdateFolderUseCase)
        folder = await _folder(unit_env, uuid4())

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateFolderRequest(
                    folder_id=folder.folder_id, user_id=str(uuid4()), name="x"
                )
            )


class TestDeleteFolder:
    @pytest.mark.asyncio
    async def test_delete_unfiles_lists(self, unit_env):
        """Lists outlive their folder."""
        # Arrange
        use_case = await unit_env.get(DeleteFolderUseCase)
        get_lists = await unit_env.get(GetListsUseCase)
        get_folders = await unit_env.get(GetFoldersUseCase)
        owner = uuid4()
        folder = await _folder(unit_env, owner)
        filed = await _list(unit_env, owner, folder.folder_id)

        # Act
        deleted = await use_case.execute(
            DeleteFolderRequest(folder_id=folder.folder_id, user_id=str(owner))
        )

        # Assert
        assert deleted is True
        lists = (await get_lists.execute(GetListsRequest(user_id=str(owner)))).lists
        assert [(item.list_id, item.folder_id) for item in lists] == [
            (filed.list_id, None)
        ]
        folders = await get_folders.execute(GetFoldersRequest(user_id=str(owner)))
        assert folders.total == 0

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteFolderUseCase)
        folder = await _folder(unit_env, uuid4())

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteFolderRequest(folder_id=folder.folder_id, user_id=str(uuid4()))
            )
