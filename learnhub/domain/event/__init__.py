"""Domain events and the in-process event bus."""

from learnhub.domain.event.bus import EventBus
from learnhub.domain.event.events import (
    CommentLiked,
    CommentMentioned,
    CommentPinned,
    CommentReplied,
    DomainEvent,
    MessageSent,
    ProfileFieldChanged,
)

__all__ = [
    "EventBus",
    "DomainEvent",
    "CommentReplied",
    "CommentMentioned",
    "CommentLiked",
    "CommentPinned",
    "MessageSent",
    "ProfileFieldChanged",
]
