"""Notification use cases."""

from .list_notifications import (
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationView,
    UnreadCountResponse,
)
from .mark_read import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationActionRequest,
)

__all__ = [
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkAllReadResponse",
    "MarkNotificationReadUseCase",
    "NotificationActionRequest",
    "NotificationView",
    "UnreadCountResponse",
]
