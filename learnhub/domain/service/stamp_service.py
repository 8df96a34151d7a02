"""Identity stamp fan-out.

User records are the source of truth. When a user changes a field that is
copied into stamps, each collection holding stamps is refreshed by its own
updater. Updaters are idempotent and independent: one failing leaves the
others untouched.
"""

import logfire

from learnhub.domain.event import EventBus, ProfileFieldChanged
from learnhub.domain.repository import (
    CommentRepository,
    ConversationRepository,
    MessageRepository,
    NotificationRepository,
    PostRepository,
)

from .base import Service


class IdentityStampProjector(Service):
    """Rewrites embedded identity stamps after a profile change."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize the projector.

        Args:
            comment_repository: Holds comment author stamps
            post_repository: Holds post author stamps
            message_repository: Holds message sender stamps
            conversation_repository: Holds last-message sender stamps
            notification_repository: Holds notification actor stamps
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.message_repository = message_repository
        self.conversation_repository = conversation_repository
        self.notification_repository = notification_repository

    def register(self, bus: EventBus) -> None:
        """Subscribe one handler per stamp-holding collection."""
        bus.subscribe(ProfileFieldChanged, self.update_comments)
        bus.subscribe(ProfileFieldChanged, self.update_posts)
        bus.subscribe(ProfileFieldChanged, self.update_messages)
        bus.subscribe(ProfileFieldChanged, self.update_conversations)
        bus.subscribe(ProfileFieldChanged, self.update_notifications)

    async def update_comments(self, event: ProfileFieldChanged) -> None:
        updated = await self.comment_repository.update_author_stamp(
            event.user_id, event.patch
        )
        self._log("comments", event, updated)

    async def update_posts(self, event: ProfileFieldChanged) -> None:
        updated = await self.post_repository.update_author_stamp(
            event.user_id, event.patch
        )
        self._log("posts", event, updated)

    async def update_messages(self, event: ProfileFieldChanged) -> None:
        updated = await self.message_repository.update_sender_stamp(
            event.user_id, event.patch
        )
        self._log("messages", event, updated)

    async def update_conversations(self, event: ProfileFieldChanged) -> None:
        updated = (
            await self.conversation_repository.update_last_message_sender_stamp(
                event.user_id, event.patch
            )
        )
        self._log("conversations", event, updated)

    async def update_notifications(self, event: ProfileFieldChanged) -> None:
        updated = await self.notification_repository.update_actor_stamp(
            event.user_id, event.patch
        )
        self._log("notifications", event, updated)

    @staticmethod
    def _log(collection: str, event: ProfileFieldChanged, updated: int) -> None:
        logfire.info(
            "Identity stamps refreshed",
            collection=collection,
            user_id=str(event.user_id),
            fields=sorted(event.patch.changes()),
            updated=updated,
        )
