"""PostgreSQL repository implementations."""

from learnhub.persistence.repository.comment import PostgresCommentRepository
from learnhub.persistence.repository.message import (
    PostgresConversationRepository,
    PostgresMessageRepository,
)
from learnhub.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from learnhub.persistence.repository.post import PostgresPostRepository
from learnhub.persistence.repository.unit_of_work import SessionUnitOfWork
from learnhub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresConversationRepository",
    "PostgresMessageRepository",
    "SessionUnitOfWork",
]
