"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .message import InMemoryConversationRepository, InMemoryMessageRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryConversationRepository",
    "InMemoryMessageRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
