"""Notification entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import (
    IdentityStamp,
    NotificationId,
    NotificationType,
    PostId,
    ReferenceType,
    UserId,
)
from learnhub.domain.value.common import ValueObject


class NotificationReference(ValueObject):
    """What a notification points at."""

    type: ReferenceType
    id: UUID
    post_id: Optional[PostId] = None  # For comment notifications


class Notification(DomainModel):
    """Notification delivered to a single recipient."""

    id: NotificationId
    recipient_id: UserId
    type: NotificationType
    actor: IdentityStamp
    reference: NotificationReference
    content: str = ""  # Preview text
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
