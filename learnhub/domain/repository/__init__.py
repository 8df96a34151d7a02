"""Repository interfaces for LearnHub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from learnhub.domain.repository.comment import CommentRepository
from learnhub.domain.repository.message import (
    ConversationRepository,
    MessageRepository,
)
from learnhub.domain.repository.notification import NotificationRepository
from learnhub.domain.repository.post import PostRepository
from learnhub.domain.repository.unit_of_work import UnitOfWork
from learnhub.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "NotificationRepository",
    "ConversationRepository",
    "MessageRepository",
    "UnitOfWork",
]
