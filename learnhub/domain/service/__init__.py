"""Domain services."""

from .base import Service
from .comment_service import (
    CommentContext,
    CommentService,
    CommentThread,
    ReplyPage,
    RootCommentPage,
)
from .content import extract_mentions, sanitize_content
from .jwt_service import JWTService
from .message_service import MessageService
from .notification_emitter import NotificationEmitter
from .notification_service import NotificationService
from .post_service import PostService
from .stamp_service import IdentityStampProjector
from .user_service import UserService

__all__ = [
    "CommentContext",
    "CommentService",
    "CommentThread",
    "IdentityStampProjector",
    "JWTService",
    "MessageService",
    "NotificationEmitter",
    "NotificationService",
    "PostService",
    "ReplyPage",
    "RootCommentPage",
    "Service",
    "UserService",
    "extract_mentions",
    "sanitize_content",
]
