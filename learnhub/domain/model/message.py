"""Direct messaging entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import ConversationId, IdentityStamp, MessageId, UserId
from learnhub.domain.value.common import ValueObject


class LastMessage(ValueObject):
    """Snapshot of the latest message, shown in conversation lists."""

    content: str
    sender: IdentityStamp
    created_at: datetime


class Conversation(DomainModel):
    """Conversation between two or more users."""

    id: ConversationId
    participant_ids: list[UserId] = Field(min_length=2)
    last_message: Optional[LastMessage] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Message(DomainModel):
    """Message sent within a conversation."""

    id: MessageId
    conversation_id: ConversationId
    sender: IdentityStamp
    content: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None
