"""Domain model entities for LearnHub."""

from learnhub.domain.model.comment import Comment
from learnhub.domain.model.message import Conversation, LastMessage, Message
from learnhub.domain.model.notification import Notification, NotificationReference
from learnhub.domain.model.post import Post
from learnhub.domain.model.user import User, UserStats

__all__ = [
    "User",
    "UserStats",
    "Post",
    "Comment",
    "Notification",
    "NotificationReference",
    "Conversation",
    "LastMessage",
    "Message",
]
