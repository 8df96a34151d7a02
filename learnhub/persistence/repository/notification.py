"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Notification
from learnhub.domain.repository import NotificationRepository
from learnhub.domain.value import NotificationId, StampPatch, UserId
from learnhub.persistence.mappers import (
    notification_to_dict,
    row_to_notification,
    stamp_patch_to_dict,
)
from learnhub.persistence.tables import notifications_table

n = notifications_table.c


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = notifications_table.insert().values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Find a recipient's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(n.recipient_id == recipient_id)
            .order_by(desc(n.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_recipient(self, recipient_id: UserId) -> int:
        """Count all notifications of a recipient."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(n.recipient_id == recipient_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count unread notifications of a recipient."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(n.recipient_id == recipient_id)
            .where(n.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId, read_at: datetime
    ) -> Optional[Notification]:
        """Mark one notification read."""
        stmt = (
            update(notifications_table)
            .where(n.id == notification_id)
            .where(n.recipient_id == recipient_id)
            .values(is_read=True, read_at=read_at)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_notification(dict(row)) if row else None

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification read."""
        stmt = (
            update(notifications_table)
            .where(n.recipient_id == recipient_id)
            .where(n.is_read.is_(False))
            .values(is_read=True, read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        stmt = (
            delete(notifications_table)
            .where(n.id == notification_id)
            .where(n.recipient_id == recipient_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def update_actor_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to notifications the user triggered."""
        if patch.is_empty():
            return 0
        stmt = (
            update(notifications_table)
            .where(n.actor_id == user_id)
            .values(**stamp_patch_to_dict(patch, "actor"))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
