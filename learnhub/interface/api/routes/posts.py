"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from learnhub.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
)
from learnhub.domain.service import JWTService
from learnhub.interface.api.auth import require_user_id
from learnhub.interface.api.envelope import ApiResponse, ok

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str


@router.post(
    "",
    response_model=ApiResponse[CreatePostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[CreatePostResponse]:
    """Publish a post.

    Requires authentication as a teacher.
    """
    user_id = require_user_id(jwt_service, auth_token, "create posts")
    return ok(
        await create_post_use_case.execute(
            CreatePostRequest(author_id=user_id, content=request.content)
        )
    )


@router.get("/{post_id}", response_model=ApiResponse[GetPostResponse])
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> ApiResponse[GetPostResponse]:
    """Get a post by ID."""
    return ok(await get_post_use_case.execute(GetPostRequest(post_id=post_id)))
