"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from learnhub.domain.model.notification import Notification
from learnhub.domain.value import NotificationId, StampPatch, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        pass

    @abstractmethod
    async def count_by_recipient(self, recipient_id: UserId) -> int:
        """Count all notifications of a recipient."""
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications of a recipient."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications read.

        Returns:
            Updated notification, or None if it doesn't exist or belongs
            to someone else
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification of a recipient read.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications.

        Returns:
            True if a notification was deleted
        """
        pass

    @abstractmethod
    async def update_actor_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every notification the user triggered.

        Returns:
            Number of notifications updated
        """
        pass
