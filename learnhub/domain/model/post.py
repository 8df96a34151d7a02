"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import IdentityStamp, PostId


class Post(DomainModel):
    """A post published to the class feed.

    ``comment_count`` counts every comment and reply ever created on the
    post and is only changed through atomic increments.
    """

    id: PostId
    author: IdentityStamp
    content: str = Field(min_length=1, max_length=10000)
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
