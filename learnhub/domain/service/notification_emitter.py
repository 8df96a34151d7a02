"""Turns comment and message events into notifications."""

import logfire

from learnhub.domain.event import (
    CommentLiked,
    CommentMentioned,
    CommentPinned,
    CommentReplied,
    EventBus,
    MessageSent,
)
from learnhub.domain.value import NotificationType, ReferenceType

from .notification_service import NotificationService
from .user_service import UserService


class NotificationEmitter:
    """Event handlers that notify the people affected by an action."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        self.notification_service = notification_service
        self.user_service = user_service

    def register(self, bus: EventBus) -> None:
        """Subscribe every handler to its event."""
        bus.subscribe(CommentReplied, self.on_comment_replied)
        bus.subscribe(CommentMentioned, self.on_comment_mentioned)
        bus.subscribe(CommentLiked, self.on_comment_liked)
        bus.subscribe(CommentPinned, self.on_comment_pinned)
        bus.subscribe(MessageSent, self.on_message_sent)

    async def on_comment_replied(self, event: CommentReplied) -> None:
        reply = event.reply
        await self.notification_service.notify(
            recipient_id=event.parent_author_id,
            type=NotificationType.COMMENT_REPLY,
            actor=reply.author,
            reference_type=ReferenceType.COMMENT,
            reference_id=reply.id,
            post_id=reply.post_id,
            content=reply.content,
        )

    async def on_comment_mentioned(self, event: CommentMentioned) -> None:
        comment = event.comment
        users = await self.user_service.find_mentioned_users(
            event.usernames, exclude=comment.author.user_id
        )
        logfire.info(
            "Mentions resolved",
            comment_id=str(comment.id),
            mentioned=len(event.usernames),
            resolved=len(users),
        )
        for user in users:
            await self.notification_service.notify(
                recipient_id=user.id,
                type=NotificationType.MENTION,
                actor=comment.author,
                reference_type=ReferenceType.COMMENT,
                reference_id=comment.id,
                post_id=comment.post_id,
                content=comment.content,
            )

    async def on_comment_liked(self, event: CommentLiked) -> None:
        comment = event.comment
        await self.notification_service.notify(
            recipient_id=comment.author.user_id,
            type=NotificationType.COMMENT_LIKE,
            actor=event.liker,
            reference_type=ReferenceType.COMMENT,
            reference_id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
        )

    async def on_comment_pinned(self, event: CommentPinned) -> None:
        comment = event.comment
        await self.notification_service.notify(
            recipient_id=comment.author.user_id,
            type=NotificationType.PINNED_COMMENT,
            actor=event.pinned_by,
            reference_type=ReferenceType.COMMENT,
            reference_id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
        )

    async def on_message_sent(self, event: MessageSent) -> None:
        message = event.message
        for recipient_id in event.recipient_ids:
            await self.notification_service.notify(
                recipient_id=recipient_id,
                type=NotificationType.DIRECT_MESSAGE,
                actor=message.sender,
                reference_type=ReferenceType.MESSAGE,
                reference_id=message.id,
                content=message.content,
            )
