"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from learnhub.domain.model.notification import Notification
from learnhub.domain.repository.notification import NotificationRepository
from learnhub.domain.value import NotificationId, StampPatch, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _of(self, recipient_id: UserId) -> list[Notification]:
        return [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Notification]:
        """Find a recipient's notifications, newest first."""
        items = sorted(self._of(recipient_id), key=lambda n: n.created_at, reverse=True)
        return items[offset : offset + limit]

    async def count_by_recipient(self, recipient_id: UserId) -> int:
        """Count all notifications of a recipient."""
        return len(self._of(recipient_id))

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications of a recipient."""
        return sum(1 for n in self._of(recipient_id) if not n.is_read)

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark one notification read."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return None
        updated = notification.model_copy(update={"is_read": True, "read_at": read_at})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification read."""
        marked = 0
        for notification in self._of(recipient_id):
            if not notification.is_read:
                self._notifications[notification.id] = notification.model_copy(
                    update={"is_read": True, "read_at": read_at}
                )
                marked += 1
        return marked

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return False
        del self._notifications[notification_id]
        return True

    async def update_actor_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to notifications the user triggered."""
        if patch.is_empty():
            return 0
        updated = 0
        for notification in list(self._notifications.values()):
            if notification.actor.user_id == user_id:
                self._notifications[notification.id] = notification.model_copy(
                    update={"actor": patch.apply(notification.actor)}
                )
                updated += 1
        return updated
