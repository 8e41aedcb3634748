"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.domain.error import NotAuthorizedError
from whizlist.domain.service import CommentService
from whizlist.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment.user_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
