"""Update user profile and remove avatar use cases.

Both queue ``ProfileFieldChanged`` on the event bus when a field copied
into identity stamps actually changed. The bus delivers it once the
response is sent, so every embedded stamp gets refreshed without holding
up the profile edit.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.event import EventBus, ProfileFieldChanged
from learnhub.domain.model import User
from learnhub.domain.service import UserService
from learnhub.domain.value import StampPatch, UserId

from .get_user_profile import UserProfileView


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left unset are not changed.
    """

    user_id: str  # From authenticated user
    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = None


class RemoveAvatarRequest(BaseModel):
    """Remove avatar request."""

    user_id: str  # From authenticated user


async def _apply_profile_changes(
    user_service: UserService,
    event_bus: EventBus,
    user_id: UserId,
    changes: dict[str, Any],
) -> User:
    before = await user_service.get_active_by_id(user_id)
    after = await user_service.update_profile(user_id, changes)
    patch = StampPatch.between(before.stamp(), after.stamp())
    if not patch.is_empty():
        event_bus.defer(ProfileFieldChanged(user_id=user_id, patch=patch))
    return after


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating one's own display name, bio or avatar."""

    def __init__(self, user_service: UserService, event_bus: EventBus) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
            event_bus: Bus that fans identity changes out to stamps
        """
        self.user_service = user_service
        self.event_bus = event_bus

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileView:
        """Execute update user profile flow.

        Steps:
        1. Apply the explicitly set fields
        2. Queue the stamp patch if display name or avatar changed; the
           route flushes it after responding

        Raises:
            ValueError: If the user id is malformed
            NotFoundError: If the user doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        changes = request.model_dump(
            include={"display_name", "bio", "avatar_url"}, exclude_unset=True
        )
        # A display name cannot be cleared
        if changes.get("display_name", "") is None:
            changes.pop("display_name")
        user = await _apply_profile_changes(
            self.user_service, self.event_bus, user_id, changes
        )
        return UserProfileView.from_user(user)


class RemoveAvatarUseCase(BaseUseCase):
    """Use case for removing one's own avatar."""

    def __init__(self, user_service: UserService, event_bus: EventBus) -> None:
        self.user_service = user_service
        self.event_bus = event_bus

    async def execute(self, request: RemoveAvatarRequest) -> UserProfileView:
        user = await _apply_profile_changes(
            self.user_service,
            self.event_bus,
            UserId(UUID(request.user_id)),
            {"avatar_url": None},
        )
        return UserProfileView.from_user(user)
