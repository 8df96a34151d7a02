"""Domain layer DI providers."""

from dishka import Scope, provide

from learnhub.config import AuthSettings, CommentSettings
from learnhub.domain.event import EventBus
from learnhub.domain.repository import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    NotificationRepository,
    PostRepository,
    UnitOfWork,
    UserRepository,
)
from learnhub.domain.service import (
    CommentService,
    IdentityStampProjector,
    JWTService,
    MessageService,
    NotificationEmitter,
    NotificationService,
    PostService,
    UserService,
)
from learnhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances, and a fresh event bus
    whose handlers write through the same session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        comment_settings: CommentSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            settings=comment_settings,
        )

    @provide
    def get_notification_emitter(
        self, notification_service: NotificationService, user_service: UserService
    ) -> NotificationEmitter:
        """Provide event handlers that create notifications."""
        return NotificationEmitter(
            notification_service=notification_service, user_service=user_service
        )

    @provide
    def get_identity_stamp_projector(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
        notification_repository: NotificationRepository,
    ) -> IdentityStampProjector:
        """Provide event handlers that refresh identity stamps."""
        return IdentityStampProjector(
            comment_repository=comment_repository,
            post_repository=post_repository,
            message_repository=message_repository,
            conversation_repository=conversation_repository,
            notification_repository=notification_repository,
        )

    @provide
    def get_event_bus(
        self,
        unit_of_work: UnitOfWork,
        notification_emitter: NotificationEmitter,
        stamp_projector: IdentityStampProjector,
    ) -> EventBus:
        """Provide event bus with all handlers subscribed."""
        bus = EventBus(unit_of_work=unit_of_work)
        notification_emitter.register(bus)
        stamp_projector.register(bus)
        return bus

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        event_bus: EventBus,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
            event_bus=event_bus,
            settings=comment_settings,
        )

    @provide
    def get_message_service(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
        event_bus: EventBus,
    ) -> MessageService:
        """Provide direct message domain service."""
        return MessageService(
            conversation_repository=conversation_repository,
            message_repository=message_repository,
            event_bus=event_bus,
        )
