"""Domain events.

Events describe something that already happened. They are published after
the primary write succeeded and drive best-effort side effects only.
"""

from datetime import datetime

from pydantic import Field

from learnhub.domain.model.comment import Comment
from learnhub.domain.model.common import utcnow
from learnhub.domain.model.message import Message
from learnhub.domain.value import IdentityStamp, StampPatch, UserId
from learnhub.domain.value.common import ValueObject


class DomainEvent(ValueObject):
    """Base class for all domain events."""

    occurred_at: datetime = Field(default_factory=utcnow)


class CommentReplied(DomainEvent):
    """A reply was posted under another comment."""

    reply: Comment
    parent_author_id: UserId


class CommentMentioned(DomainEvent):
    """A new comment mentions other users."""

    comment: Comment
    usernames: list[str]


class CommentLiked(DomainEvent):
    """A user liked a comment."""

    comment: Comment
    liker: IdentityStamp


class CommentPinned(DomainEvent):
    """The post author pinned a comment."""

    comment: Comment
    pinned_by: IdentityStamp


class MessageSent(DomainEvent):
    """A direct message was sent."""

    message: Message
    recipient_ids: list[UserId]


class ProfileFieldChanged(DomainEvent):
    """A user changed a field that is copied into identity stamps."""

    user_id: UserId
    patch: StampPatch
