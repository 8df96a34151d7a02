"""Mock persistence providers for testing."""

from dishka import Scope, provide

from learnhub.domain.repository import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    NotificationRepository,
    PostRepository,
    UnitOfWork,
    UserRepository,
)
from learnhub.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from learnhub.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data written in one request is visible
    to the next, as with a database. Each test builds its own container, so
    tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide unit of work without transactions."""
        return InMemoryUnitOfWork()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        """Provide in-memory conversation repository."""
        return InMemoryConversationRepository()

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        """Provide in-memory message repository."""
        return InMemoryMessageRepository()
