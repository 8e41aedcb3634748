"""Comment routes.

Threads hang off products, lists and folders:
/products/{id}/comments, /lists/{id}/comments, /folders/{id}/comments.
"""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from whizlist.application.usecase.comment import (
    CommentItem,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    PostCommentRequest,
    PostCommentResponse,
    PostCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from whizlist.domain.service import JWTService
from whizlist.domain.value import EntityType
from whizlist.interface.api.auth import bearer_scheme, bearer_token, require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

Collection = Literal["products", "lists", "folders"]

ENTITY_TYPES: dict[str, EntityType] = {
    "products": EntityType.PRODUCT,
    "lists": EntityType.LIST,
    "folders": EntityType.FOLDER,
}


class PostCommentAPIRequest(BaseModel):
    """API request for posting a comment.

    parent_id attaches the reply exactly there; reply_to is the comment the
    user clicked, and the depth rule picks the parent.
    """

    content: str = Field(min_length=1, max_length=10000)
    parent_id: UUID | None = None
    reply_to: UUID | None = None


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("/{collection}/{entity_id}/comments", response_model=GetThreadResponse)
async def get_thread(
    collection: Collection,
    entity_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetThreadResponse:
    """Get the comment thread of an entity.

    Anonymous access is allowed; like state is only reported for the
    authenticated viewer.
    """
    request = GetThreadRequest(
        entity_type=ENTITY_TYPES[collection],
        entity_id=entity_id,
        auth_token=bearer_token(credentials),
    )
    return await get_thread_use_case.execute(request)


@router.post(
    "/{collection}/{entity_id}/comments",
    response_model=PostCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    collection: Collection,
    entity_id: str,
    request: PostCommentAPIRequest,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostCommentResponse:
    """Post a comment or a reply. Returns it with the re-fetched thread."""
    user_id = require_user(jwt_service, credentials)
    return await post_comment_use_case.execute(
        PostCommentRequest(
            entity_type=ENTITY_TYPES[collection],
            entity_id=entity_id,
            user_id=str(user_id),
            content=request.content,
            parent_id=str(request.parent_id) if request.parent_id else None,
            reply_to=str(request.reply_to) if request.reply_to else None,
        )
    )


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def edit_comment(
    comment_id: UUID,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentItem:
    """Edit a comment. Only the author can edit."""
    user_id = require_user(jwt_service, credentials)
    return await edit_comment_use_case.execute(
        EditCommentRequest(
            comment_id=str(comment_id), user_id=str(user_id), content=request.content
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Delete a comment with all of its replies. Only the author can delete."""
    user_id = require_user(jwt_service, credentials)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=str(user_id))
    )


@router.post("/comments/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    comment_id: UUID,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ToggleLikeResponse:
    """Like a comment, or unlike it if already liked."""
    user_id = require_user(jwt_service, credentials)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(comment_id=str(comment_id), user_id=str(user_id))
    )
