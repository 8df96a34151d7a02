"""Notification domain service."""

from uuid import UUID, uuid4

import logfire

from learnhub.config import CommentSettings
from learnhub.domain.model.common import utcnow
from learnhub.domain.model.notification import Notification, NotificationReference
from learnhub.domain.repository import NotificationRepository
from learnhub.domain.value import (
    IdentityStamp,
    NotificationId,
    NotificationType,
    PostId,
    ReferenceType,
    UserId,
)

from .base import Service


class NotificationService(Service):
    """Stores notifications and serves a recipient's inbox."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        settings: CommentSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            settings: Supplies the preview length
        """
        self.notification_repository = notification_repository
        self.settings = settings

    async def notify(
        self,
        recipient_id: UserId,
        type: NotificationType,
        actor: IdentityStamp,
        reference_type: ReferenceType,
        reference_id: UUID,
        post_id: PostId | None = None,
        content: str = "",
    ) -> Notification | None:
        """Store a notification unless the actor is the recipient.

        Args:
            recipient_id: User to notify
            type: Kind of notification
            actor: Stamp of the user who caused it
            reference_type: Type of the referenced entity
            reference_id: ID of the referenced entity
            post_id: Owning post for comment references
            content: Text to preview (truncated)

        Returns:
            Stored notification, or None when suppressed
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=str(recipient_id),
            type=type.value,
            actor_id=str(actor.user_id),
        ):
            if actor.user_id == recipient_id:
                logfire.info(
                    "Self-notification suppressed",
                    recipient_id=str(recipient_id),
                    type=type.value,
                )
                return None

            notification = Notification(
                id=NotificationId(uuid4()),
                recipient_id=recipient_id,
                type=type,
                actor=actor,
                reference=NotificationReference(
                    type=reference_type, id=reference_id, post_id=post_id
                ),
                content=content[: self.settings.preview_length],
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=type.value,
            )
            return saved

    async def list_notifications(
        self, recipient_id: UserId, page: int = 1, limit: int = 20
    ) -> tuple[list[Notification], int]:
        """List a recipient's notifications, newest first.

        Returns:
            The page of notifications and the recipient's total count
        """
        with logfire.span(
            "notification_service.list_notifications",
            recipient_id=str(recipient_id),
            page=page,
            limit=limit,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id, limit=limit, offset=(page - 1) * limit
            )
            total = await self.notification_repository.count_by_recipient(
                recipient_id
            )
            return notifications, total

    async def unread_count(self, recipient_id: UserId) -> int:
        return await self.notification_repository.count_unread(recipient_id)

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one notification read.

        Raises:
            NotFoundError: If it doesn't exist or belongs to someone else
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            notification = await self.notification_repository.mark_read(
                notification_id, recipient_id, utcnow()
            )
            if notification is None:
                raise self.not_found(
                    "Notification", notification_id, recipient_id=str(recipient_id)
                )
            return notification

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification read.

        Returns:
            Number of notifications changed
        """
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            modified = await self.notification_repository.mark_all_read(
                recipient_id, utcnow()
            )
            logfire.info(
                "Notifications marked read",
                recipient_id=str(recipient_id),
                modified=modified,
            )
            return modified

    async def delete_notification(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> None:
        """Delete one of the recipient's notifications.

        Raises:
            NotFoundError: If it doesn't exist or belongs to someone else
        """
        with logfire.span(
            "notification_service.delete_notification",
            notification_id=str(notification_id),
        ):
            deleted = await self.notification_repository.delete(
                notification_id, recipient_id
            )
            if not deleted:
                raise self.not_found(
                    "Notification", notification_id, recipient_id=str(recipient_id)
                )
            logfire.info("Notification deleted", notification_id=str(notification_id))
