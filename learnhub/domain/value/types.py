"""Domain value objects for LearnHub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from learnhub.domain.value.common import RootValueObject


class Role(str, Enum):
    """Platform role of a user."""

    STUDENT = "student"
    TEACHER = "teacher"

    @property
    def is_elevated(self) -> bool:
        """Whether the role carries teacher privileges."""
        return self is Role.TEACHER


class CommentSort(str, Enum):
    """Sort order for root comment listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    POPULAR = "popular"  # like_count DESC, then newest
    DISCUSSED = "discussed"  # total_reply_count DESC, then newest


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    COMMENT_REPLY = "comment_reply"
    COMMENT_LIKE = "comment_like"
    MENTION = "mention"
    PINNED_COMMENT = "pinned_comment"
    NEW_POST = "new_post"
    DIRECT_MESSAGE = "direct_message"


class ReferenceType(str, Enum):
    """Type of entity a notification points at."""

    POST = "post"
    COMMENT = "comment"
    MESSAGE = "message"


class UserStat(str, Enum):
    """Denormalized per-user counters."""

    COMMENTS_COUNT = "comments_count"
    LIKES_GIVEN = "likes_given"
    POSTS_COUNT = "posts_count"


USERNAME_PATTERN = re.compile(r"^[a-z0-9_]{3,30}$")


class Username(RootValueObject[str]):
    """Immutable login name, also used for @mentions.

    Lowercase letters, digits and underscores, 3-30 characters.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Lower-case before validating."""
        return v.lower() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-30 characters of letters, numbers and underscores"
            )
        return v
