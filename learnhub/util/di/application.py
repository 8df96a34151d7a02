"""Application layer DI providers."""

from dishka import Scope, provide

from learnhub.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    LikeCommentUseCase,
    PinCommentUseCase,
    UnlikeCommentUseCase,
    UnpinCommentUseCase,
    UpdateCommentUseCase,
)
from learnhub.application.usecase.notification import (
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from learnhub.application.usecase.post import CreatePostUseCase, GetPostUseCase
from learnhub.application.usecase.user import (
    GetUserProfileUseCase,
    RemoveAvatarUseCase,
    UpdateUserProfileUseCase,
)
from learnhub.domain.event import EventBus
from learnhub.domain.service import (
    CommentService,
    NotificationService,
    PostService,
    UserService,
)
from learnhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_like_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_unlike_comment_use_case(
        self, comment_service: CommentService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(comment_service=comment_service)

    @provide
    def get_pin_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> PinCommentUseCase:
        """Provide pin comment use case."""
        return PinCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_unpin_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UnpinCommentUseCase:
        """Provide unpin comment use case."""
        return UnpinCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide list root comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_replies_use_case(self, comment_service: CommentService) -> GetRepliesUseCase:
        """Provide list replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide
    def get_comment_use_case(self, comment_service: CommentService) -> GetCommentUseCase:
        """Provide deep-link comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService, event_bus: EventBus
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service, event_bus=event_bus)

    @provide
    def get_remove_avatar_use_case(
        self, user_service: UserService, event_bus: EventBus
    ) -> RemoveAvatarUseCase:
        """Provide remove avatar use case."""
        return RemoveAvatarUseCase(user_service=user_service, event_bus=event_bus)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)
