"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from whizlist.domain.error import NotFoundError, ValidationError
from whizlist.domain.model.comment import AnnotatedComment, Comment, CommentNode
from whizlist.domain.repository import CommentRepository, ProfileRepository
from whizlist.domain.value import CommentId, EntityType, ProductId, UserId

from .base import Service
from .comment_like_service import CommentLikeService
from .thread import build_thread


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        like_service: CommentLikeService,
        max_length: int = 10000,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile repository for author lookups
            like_service: Comment like service for like aggregation
            max_length: Maximum comment length in characters
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository
        self.like_service = like_service
        self.max_length = max_length

    def _clean_content(self, content: str) -> str:
        cleaned = content.strip()
        if not cleaned:
            raise ValidationError("Comment content cannot be empty")
        if len(cleaned) > self.max_length:
            raise ValidationError(
                f"Comment content exceeds {self.max_length} characters"
            )
        return cleaned

    async def get_comments_for_entity(
        self,
        entity_type: EntityType,
        entity_id: str,
        viewer_id: UserId | None = None,
    ) -> list[AnnotatedComment]:
        """Load the comments of an entity with likes and authors attached.

        like_count and is_liked_by_user are recomputed from the like
        records on every call.

        Args:
            entity_type: Kind of entity
            entity_id: Entity ID
            viewer_id: Requesting user, None when anonymous

        Returns:
            Annotated comments in load order (flat)
        """
        with logfire.span(
            "comment_service.get_comments_for_entity",
            entity_type=entity_type.value,
            entity_id=entity_id,
        ):
            comments = await self.comment_repository.find_by_entity(
                entity_type, entity_id
            )
            comment_ids = [comment.id for comment in comments]

            counts = await self.like_service.count_likes(comment_ids)
            liked = await self.like_service.get_user_likes_for_comments(
                viewer_id, comment_ids
            )
            author_ids = list(dict.fromkeys(comment.user_id for comment in comments))
            profiles = {
                profile.id: profile
                for profile in await self.profile_repository.find_by_ids(author_ids)
            }

            logfire.info(
                "Comments retrieved for entity",
                entity_type=entity_type.value,
                entity_id=entity_id,
                count=len(comments),
            )
            return [
                AnnotatedComment(
                    comment=comment,
                    author=profiles.get(comment.user_id),
                    like_count=counts.get(comment.id, 0),
                    is_liked_by_user=liked.get(comment.id, False),
                )
                for comment in comments
            ]

    async def get_thread(
        self,
        entity_type: EntityType,
        entity_id: str,
        viewer_id: UserId | None = None,
    ) -> list[CommentNode]:
        """Fetch the threaded comments of an entity.

        Returns:
            Root nodes, orphans promoted, every level chronological
        """
        annotated = await self.get_comments_for_entity(
            entity_type, entity_id, viewer_id
        )
        return build_thread(annotated)

    async def create_comment(
        self,
        entity_type: EntityType,
        entity_id: str,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an entity or reply to another comment.

        Args:
            entity_type: Kind of entity being commented on
            entity_id: Entity ID
            author_id: Author user ID
            content: Comment text (stripped before saving)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is blank or the parent is invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            entity_type=entity_type.value,
            entity_id=entity_id,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            cleaned = self._clean_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        entity_id=entity_id,
                    )
                    raise ValidationError("Parent comment not found")
                if (
                    parent.entity_type != entity_type
                    or parent.entity_id != entity_id
                ):
                    logfire.error(
                        "Parent comment does not belong to entity",
                        parent_id=str(parent_id),
                        parent_entity_id=parent.entity_id,
                        target_entity_id=entity_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this entity"
                    )

            product_id = None
            if entity_type == EntityType.PRODUCT:
                product_id = ProductId(_parse_uuid(entity_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                content=cleaned,
                entity_type=entity_type,
                entity_id=entity_id,
                user_id=author_id,
                parent_id=parent_id,
                product_id=product_id,
                created_at=now,
                updated_at=now,
                is_edited=False,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                entity_type=entity_type.value,
                entity_id=entity_id,
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the text of a comment and mark it edited.

        is_edited is set even when the text is unchanged.

        Args:
            comment_id: Comment ID
            content: New text content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            cleaned = self._clean_content(content)
            comment = await self.get_comment_by_id(comment_id)

            updated = comment.model_copy(
                update={
                    "content": cleaned,
                    "is_edited": True,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info("Comment content updated", comment_id=str(comment_id))
            return saved

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with all of its replies.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            await self.get_comment_by_id(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError(f"Invalid product ID: {value}")
