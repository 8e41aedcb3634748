"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.domain.error import NotAuthorizedError
from whizlist.domain.service import CommentService
from whizlist.domain.value import CommentId, UserId

from .items import CommentItem, comment_to_item


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be author)
    content: str


class EditCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Execute edit comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If the new content is blank
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment.user_id != user_id:
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        return comment_to_item(updated)
