"""Domain value objects for LearnHub."""

from learnhub.domain.value.identifiers import (
    CommentId,
    ConversationId,
    MessageId,
    NotificationId,
    PostId,
    UserId,
)
from learnhub.domain.value.path import MaterializedPath
from learnhub.domain.value.stamp import IdentityStamp, StampPatch
from learnhub.domain.value.types import (
    CommentSort,
    NotificationType,
    ReferenceType,
    Role,
    Username,
    UserStat,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    "ConversationId",
    "MessageId",
    # Types
    "Role",
    "Username",
    "UserStat",
    "CommentSort",
    "NotificationType",
    "ReferenceType",
    "MaterializedPath",
    "IdentityStamp",
    "StampPatch",
]
