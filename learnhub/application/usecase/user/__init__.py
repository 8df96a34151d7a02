"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileView,
)
from .update_user_profile import (
    RemoveAvatarRequest,
    RemoveAvatarUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "RemoveAvatarRequest",
    "RemoveAvatarUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserProfileView",
]
