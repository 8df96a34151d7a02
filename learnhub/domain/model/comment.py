"""Comment entity.

Comments are threaded discussions on posts. Each comment stores its
ancestry as a materialized path, so a whole thread or the chain above a
single comment can be fetched without recursive lookups.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from learnhub.domain.model.common import DomainModel, utcnow
from learnhub.domain.value import (
    CommentId,
    IdentityStamp,
    MaterializedPath,
    PostId,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - root_id: Top-level comment of the thread (own id for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)
    - path: Root-first chain of ids ending with this comment's id

    Counters (likes, replies) are only changed through atomic repository
    updates, never by saving a modified copy.
    """

    id: CommentId
    post_id: PostId
    author: IdentityStamp
    content: str = Field(min_length=1)  # Length limit comes from CommentSettings
    mentions: list[str] = Field(default_factory=list)
    parent_id: Optional[CommentId] = None
    root_id: CommentId
    path: MaterializedPath
    depth: int = Field(default=0, ge=0)
    liked_by: frozenset[UserId] = frozenset()
    like_count: int = Field(default=0, ge=0)
    reply_count: int = Field(default=0, ge=0)
    total_reply_count: int = Field(default=0, ge=0)
    is_pinned: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    edited_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_threading(self) -> "Comment":
        """Path, depth, parent and root must describe the same position."""
        if self.path.leaf != self.id:
            raise ValueError("Comment path must end with the comment's own id")
        if self.path.depth != self.depth:
            raise ValueError(
                f"Comment depth {self.depth} does not match path depth {self.path.depth}"
            )
        if self.path.thread_root != self.root_id:
            raise ValueError("Comment root_id must be the first segment of its path")
        if self.parent_id is None:
            if self.depth != 0:
                raise ValueError("Top-level comments must have depth 0")
        elif self.path.ancestors[-1] != self.parent_id:
            raise ValueError("Comment path must pass through its parent")
        return self

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_edited(self) -> bool:
        return self.edited_at is not None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_liked_by(self, user_id: UserId | None) -> bool:
        """Whether ``user_id`` has liked this comment (False for anonymous)."""
        return user_id is not None and user_id in self.liked_by
