"""Get comment thread use case."""

from pydantic import BaseModel

from whizlist.domain.service import CommentService, JWTService
from whizlist.domain.service.thread import flatten
from whizlist.domain.value import EntityType

from .items import CommentItem, node_to_item


class GetThreadRequest(BaseModel):
    """Get thread request."""

    entity_type: EntityType
    entity_id: str
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetThreadResponse(BaseModel):
    """Get thread response."""

    entity_type: EntityType
    entity_id: str
    comments: list[CommentItem]  # Root comments with nested replies
    total: int  # All comments, replies included


class GetThreadUseCase:
    """Use case for fetching the threaded comments of an entity."""

    def __init__(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for decoding auth tokens
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Anonymous viewers (or invalid tokens) get is_liked_by_user=False
        on every comment.

        Args:
            request: Entity reference and optional auth token

        Returns:
            Root comments sorted oldest first, replies nested
        """
        viewer_id = self.jwt_service.get_user_id_from_token(request.auth_token)

        roots = await self.comment_service.get_thread(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            viewer_id=viewer_id,
        )

        return GetThreadResponse(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            comments=[node_to_item(root) for root in roots],
            total=len(flatten(roots)),
        )
