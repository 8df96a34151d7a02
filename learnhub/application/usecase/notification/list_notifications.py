"""Notification inbox use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import Pagination, StampView
from learnhub.domain.model import Notification
from learnhub.domain.service import NotificationService
from learnhub.domain.value import NotificationType, ReferenceType, UserId

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


class NotificationView(BaseModel):
    """A notification as returned to its recipient."""

    notification_id: str
    type: NotificationType
    actor: StampView
    reference_type: ReferenceType
    reference_id: str
    post_id: str | None
    content: str
    is_read: bool
    read_at: datetime | None
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        reference = notification.reference
        return cls(
            notification_id=str(notification.id),
            type=notification.type,
            actor=StampView.from_stamp(notification.actor),
            reference_type=reference.type,
            reference_id=str(reference.id),
            post_id=str(reference.post_id) if reference.post_id else None,
            content=notification.content,
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # From authenticated user
    page: int = 1
    limit: int | None = None


class ListNotificationsResponse(BaseModel):
    """One page of the inbox plus the unread count."""

    notifications: list[NotificationView]
    unread_count: int
    pagination: Pagination


class UnreadCountResponse(BaseModel):
    """Unread notification count."""

    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading one's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(UUID(request.user_id))
        page = max(request.page, 1)
        limit = request.limit if request.limit and request.limit > 0 else DEFAULT_PAGE_SIZE
        limit = min(limit, MAX_PAGE_SIZE)

        notifications, total = await self.notification_service.list_notifications(
            user_id, page=page, limit=limit
        )
        unread = await self.notification_service.unread_count(user_id)
        return ListNotificationsResponse(
            notifications=[NotificationView.from_notification(n) for n in notifications],
            unread_count=unread,
            pagination=Pagination.build(page, limit, total),
        )


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, user_id: str) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(UserId(UUID(user_id)))
        return UnreadCountResponse(unread_count=count)
