"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, BackgroundTasks, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from learnhub.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    RemoveAvatarRequest,
    RemoveAvatarUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfileView,
)
from learnhub.domain.event import EventBus
from learnhub.domain.service import JWTService
from learnhub.domain.value import Username
from learnhub.interface.api.auth import require_user_id
from learnhub.interface.api.envelope import ApiResponse, ok

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile.

    Only fields present in the body are changed.
    """

    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None


@router.put("/me", response_model=ApiResponse[UserProfileView])
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    event_bus: FromDishka[EventBus],
    background_tasks: BackgroundTasks,
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[UserProfileView]:
    """Update the authenticated user's profile.

    A changed display name or avatar is copied into every post, comment,
    message and notification that carries the user's identity stamp once
    the response has been sent.
    """
    user_id = require_user_id(jwt_service, auth_token, "update your profile")
    use_case_request = UpdateUserProfileRequest(
        user_id=user_id, **request.model_dump(exclude_unset=True)
    )
    profile = await update_user_profile_use_case.execute(use_case_request)
    background_tasks.add_task(event_bus.flush)
    return ok(profile)


@router.delete("/me/avatar", response_model=ApiResponse[UserProfileView])
async def remove_my_avatar(
    remove_avatar_use_case: FromDishka[RemoveAvatarUseCase],
    jwt_service: FromDishka[JWTService],
    event_bus: FromDishka[EventBus],
    background_tasks: BackgroundTasks,
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[UserProfileView]:
    """Remove the authenticated user's avatar."""
    user_id = require_user_id(jwt_service, auth_token, "update your profile")
    profile = await remove_avatar_use_case.execute(RemoveAvatarRequest(user_id=user_id))
    background_tasks.add_task(event_bus.flush)
    return ok(profile)


@router.get("/{username}", response_model=ApiResponse[UserProfileView])
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> ApiResponse[UserProfileView]:
    """Get a user's public profile by username.

    Raises:
        HTTPException: If the user is not found
    """
    user_profile = await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=Username(username))
    )
    if not user_profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{username}' not found",
        )
    return ok(user_profile)
