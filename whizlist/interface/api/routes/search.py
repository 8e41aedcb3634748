"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.security import HTTPAuthorizationCredentials

from whizlist.application.usecase.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
)
from whizlist.domain.service import JWTService
from whizlist.interface.api.auth import bearer_scheme, require_user

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchResponse)
async def search(
    search_use_case: FromDishka[SearchUseCase],
    jwt_service: FromDishka[JWTService],
    q: str = Query(default="", max_length=200),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> SearchResponse:
    """Search the caller's products, lists, folders and tags.

    A blank query returns empty categories.
    """
    user_id = require_user(jwt_service, credentials)
    return await search_use_case.execute(SearchRequest(user_id=str(user_id), query=q))
