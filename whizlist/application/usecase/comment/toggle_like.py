"""Toggle comment like use case."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.domain.service import CommentLikeService
from whizlist.domain.value import CommentId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str
    user_id: str


class ToggleLikeResponse(BaseModel):
    """Toggle like response with the authoritative like state."""

    comment_id: str
    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking a comment."""

    def __init__(self, like_service: CommentLikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        liked = await self.like_service.toggle_like(comment_id, user_id)
        counts = await self.like_service.count_likes([comment_id])

        return ToggleLikeResponse(
            comment_id=request.comment_id,
            liked=liked,
            like_count=counts.get(comment_id, 0),
        )
