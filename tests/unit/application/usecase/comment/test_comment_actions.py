"""Unit tests for thread, edit, delete and like use cases."""

from uuid import uuid4

import pytest

from whizlist.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from whizlist.config import AuthSettings
from whizlist.domain.error import NotAuthorizedError, NotFoundError
from whizlist.domain.service import CommentService
from whizlist.domain.value import EntityType, UserId
from whizlist.util.jwt import create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PRODUCT_ID = str(uuid4())


async def _comment(unit_env, author: UserId, content="Comment", parent_id=None):
    comment_service = await unit_env.get(CommentService)
    return await comment_service.create_comment(
        EntityType.PRODUCT, PRODUCT_ID, author, content, parent_id=parent_id
    )


class TestGetThread:
    @pytest.mark.asyncio
    async def test_thread_for_authenticated_viewer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        like_use_case = await unit_env.get(ToggleLikeUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        viewer = UserId(uuid4())
        root = await _comment(unit_env, viewer, "Root")
        await _comment(unit_env, viewer, "Reply", parent_id=root.id)
        await like_use_case.execute(
            ToggleLikeRequest(comment_id=str(root.id), user_id=str(viewer))
        )
        token = create_token(str(viewer), auth_settings)

        # Act
        response = await use_case.execute(
            GetThreadRequest(
                entity_type=EntityType.PRODUCT, entity_id=PRODUCT_ID, auth_token=token
            )
        )

        # Assert
        assert response.total == 2
        assert len(response.comments) == 1
        assert response.comments[0].like_count == 1
        assert response.comments[0].is_liked_by_user is True
        assert response.comments[0].replies[0].content == "Reply"

    @pytest.mark.asyncio
    async def test_invalid_token_reads_anonymously(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)
        like_use_case = await unit_env.get(ToggleLikeUseCase)
        author = UserId(uuid4())
        root = await _comment(unit_env, author)
        await like_use_case.execute(
            ToggleLikeRequest(comment_id=str(root.id), user_id=str(author))
        )

        response = await use_case.execute(
            GetThreadRequest(
                entity_type=EntityType.PRODUCT,
                entity_id=PRODUCT_ID,
                auth_token="garbage",
            )
        )

        assert response.comments[0].like_count == 1
        assert response.comments[0].is_liked_by_user is False


class TestEditComment:
    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        use_case = await unit_env.get(EditCommentUseCase)
        author = UserId(uuid4())
        comment = await _comment(unit_env, author)

        item = await use_case.execute(
            EditCommentRequest(
                comment_id=str(comment.id), user_id=str(author), content="Edited"
            )
        )

        assert item.content == "Edited"
        assert item.is_edited is True

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        use_case = await unit_env.get(EditCommentUseCase)
        comment = await _comment(unit_env, UserId(uuid4()))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                EditCommentRequest(
                    comment_id=str(comment.id), user_id=str(uuid4()), content="Mine"
                )
            )


class TestDeleteComment:
    @pytest.mark.asyncio
    async def test_author_deletes_subtree(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        author = UserId(uuid4())
        root = await _comment(unit_env, author, "Root")
        await _comment(unit_env, UserId(uuid4()), "Reply", parent_id=root.id)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(root.id), user_id=str(author))
        )

        assert response.deleted is True
        assert await comment_service.get_thread(EntityType.PRODUCT, PRODUCT_ID) == []

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment = await _comment(unit_env, UserId(uuid4()))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), user_id=str(uuid4()))
            )


class TestToggleLike:
    @pytest.mark.asyncio
    async def test_toggle_reports_state_and_count(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)
        comment = await _comment(unit_env, UserId(uuid4()))
        request = ToggleLikeRequest(comment_id=str(comment.id), user_id=str(uuid4()))

        liked = await use_case.execute(request)
        unliked = await use_case.execute(request)

        assert (liked.liked, liked.like_count) == (True, 1)
        assert (unliked.liked, unliked.like_count) == (False, 0)
