"""Unit tests for CommentLikeService."""

from uuid import uuid4

import pytest

from whizlist.domain.error import NotFoundError
from whizlist.domain.service import CommentLikeService, CommentService
from whizlist.domain.value import CommentId, EntityType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _comment(unit_env, content: str = "Comment"):
    comment_service = await unit_env.get(CommentService)
    return await comment_service.create_comment(
        EntityType.LIST, "list-1", UserId(uuid4()), content
    )


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_toggle_pairs_like_and_unlike(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment = await _comment(unit_env)
        user_id = UserId(uuid4())

        assert await like_service.toggle_like(comment.id, user_id) is True
        assert await like_service.count_likes([comment.id]) == {comment.id: 1}

        assert await like_service.toggle_like(comment.id, user_id) is False
        assert await like_service.count_likes([comment.id]) == {comment.id: 0}

    @pytest.mark.asyncio
    async def test_like_on_missing_comment_raises(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(CommentId(uuid4()), UserId(uuid4()))


class TestLikeAggregation:
    """Tests for count_likes and get_user_likes_for_comments."""

    @pytest.mark.asyncio
    async def test_count_covers_every_requested_id(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        liked = await _comment(unit_env, "Liked")
        unliked = await _comment(unit_env, "Unliked")
        await like_service.toggle_like(liked.id, UserId(uuid4()))
        await like_service.toggle_like(liked.id, UserId(uuid4()))

        counts = await like_service.count_likes([liked.id, unliked.id])

        assert counts == {liked.id: 2, unliked.id: 0}

    @pytest.mark.asyncio
    async def test_count_with_no_ids_is_empty(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)

        assert await like_service.count_likes([]) == {}

    @pytest.mark.asyncio
    async def test_user_likes_mark_only_own_likes(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        first = await _comment(unit_env, "First")
        second = await _comment(unit_env, "Second")
        user_id = UserId(uuid4())
        await like_service.toggle_like(second.id, user_id)
        await like_service.toggle_like(first.id, UserId(uuid4()))

        liked = await like_service.get_user_likes_for_comments(
            user_id, [first.id, second.id]
        )

        assert liked == {first.id: False, second.id: True}

    @pytest.mark.asyncio
    async def test_anonymous_viewer_likes_nothing(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment = await _comment(unit_env)
        await like_service.toggle_like(comment.id, UserId(uuid4()))

        liked = await like_service.get_user_likes_for_comments(None, [comment.id])

        assert liked == {comment.id: False}
