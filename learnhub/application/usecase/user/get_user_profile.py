"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.model import User
from learnhub.domain.service import UserService
from learnhub.domain.value import Role, Username


class UserStatsView(BaseModel):
    """Activity counters."""

    comments_count: int
    likes_given: int
    posts_count: int


class UserProfileView(BaseModel):
    """Public profile of a user."""

    user_id: str
    username: str
    display_name: str
    role: Role
    avatar_url: str | None
    bio: str
    stats: UserStatsView
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileView":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            display_name=user.display_name,
            role=user.role,
            avatar_url=user.avatar_url,
            bio=user.bio,
            stats=UserStatsView(**user.stats.model_dump()),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: Username


class GetUserProfileUseCase(BaseUseCase):
    """Use case for getting a user's public profile by username."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileView | None:
        """Execute get user profile flow.

        Args:
            request: Request with username

        Returns:
            User profile, or None if no such user exists
        """
        user = await self.user_service.get_user_by_username(request.username)
        if not user:
            return None
        return UserProfileView.from_user(user)
