"""Mark notifications read and delete notification use cases."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.service import NotificationService
from learnhub.domain.value import NotificationId, UserId

from .list_notifications import NotificationView


class NotificationActionRequest(BaseModel):
    """Request acting on one of the user's notifications."""

    notification_id: str
    user_id: str  # From authenticated user


class MarkAllReadResponse(BaseModel):
    """Result of marking the whole inbox read."""

    modified_count: int


class DeleteNotificationResponse(BaseModel):
    """Delete notification response."""

    notification_id: str
    deleted: bool


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationActionRequest) -> NotificationView:
        """Execute mark read flow.

        Raises:
            ValueError: If an id is malformed
            NotFoundError: If the notification is not the user's
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return NotificationView.from_notification(notification)


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for marking every unread notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, user_id: str) -> MarkAllReadResponse:
        modified = await self.notification_service.mark_all_read(UserId(UUID(user_id)))
        return MarkAllReadResponse(modified_count=modified)


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting one notification."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: NotificationActionRequest
    ) -> DeleteNotificationResponse:
        await self.notification_service.delete_notification(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return DeleteNotificationResponse(
            notification_id=request.notification_id, deleted=True
        )
