"""User aggregate root.

Users register as students or teachers. Their public identity is copied
into everything they author as an IdentityStamp.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import IdentityStamp, Role, UserId, Username


class UserStats(DomainModel):
    """Denormalized activity counters."""

    comments_count: int = Field(default=0, ge=0)
    likes_given: int = Field(default=0, ge=0)
    posts_count: int = Field(default=0, ge=0)


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: str
    display_name: str = Field(min_length=1, max_length=50)
    role: Role = Role.STUDENT
    avatar_url: Optional[str] = None
    bio: str = Field(default="", max_length=500)
    stats: UserStats = Field(default_factory=UserStats)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def stamp(self) -> IdentityStamp:
        """Snapshot of this user's public identity."""
        return IdentityStamp(
            user_id=self.id,
            username=self.username.root,
            display_name=self.display_name,
            avatar_url=self.avatar_url,
            role=self.role,
        )
