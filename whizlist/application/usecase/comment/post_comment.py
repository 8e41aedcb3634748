"""Post comment use case."""

from uuid import UUID

from pydantic import BaseModel

from whizlist.config import CommentSettings
from whizlist.domain.error import ValidationError
from whizlist.domain.service import CommentService
from whizlist.domain.service.thread import reply_parent
from whizlist.domain.value import CommentId, EntityType, UserId

from .items import CommentItem, comment_to_item, node_to_item


class PostCommentRequest(BaseModel):
    """Post comment request.

    parent_id attaches the comment exactly there. reply_to is the comment
    the user pressed reply on; the parent is then chosen by the nesting
    depth rule. Give at most one of them.
    """

    entity_type: EntityType
    entity_id: str
    user_id: str  # Authenticated author
    content: str
    parent_id: str | None = None
    reply_to: str | None = None


def _comment_id(value: str, field: str) -> CommentId:
    try:
        return CommentId(UUID(value))
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value}") from e


class PostCommentResponse(BaseModel):
    """Post comment response with the refreshed thread."""

    comment: CommentItem
    thread: list[CommentItem]


class PostCommentUseCase:
    """Use case for posting a comment or a reply."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize post comment use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Threading settings (maximum nesting depth)
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: PostCommentRequest) -> PostCommentResponse:
        """Execute post comment flow.

        1. Resolve the parent (explicit, or via the depth rule for reply_to)
        2. Create the comment
        3. Re-fetch the whole thread so the caller can render it

        Raises:
            ValidationError: If content is blank or the parent is invalid
            NotFoundError: If reply_to is not in the entity's thread
        """
        user_id = UserId(UUID(request.user_id))

        parent_id = None
        if request.parent_id:
            parent_id = _comment_id(request.parent_id, "parent_id")
        if request.reply_to and parent_id is None:
            current = await self.comment_service.get_thread(
                request.entity_type, request.entity_id, user_id
            )
            parent_id = reply_parent(
                current,
                _comment_id(request.reply_to, "reply_to"),
                max_depth=self.comment_settings.max_depth,
            )

        comment = await self.comment_service.create_comment(
            entity_type=request.entity_type,
            entity_id=request.entity_id,
            author_id=user_id,
            content=request.content,
            parent_id=parent_id,
        )

        thread = await self.comment_service.get_thread(
            request.entity_type, request.entity_id, user_id
        )

        return PostCommentResponse(
            comment=comment_to_item(comment),
            thread=[node_to_item(root) for root in thread],
        )
