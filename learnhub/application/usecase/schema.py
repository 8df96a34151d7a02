"""Response schemas shared by several use cases."""

import math
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from learnhub.domain.model import Comment
from learnhub.domain.value import IdentityStamp, Role, UserId


class StampView(BaseModel):
    """Identity stamp as returned to clients."""

    user_id: str
    username: str
    display_name: str
    avatar_url: str | None
    role: Role

    @classmethod
    def from_stamp(cls, stamp: IdentityStamp) -> "StampView":
        return cls(
            user_id=str(stamp.user_id),
            username=stamp.username,
            display_name=stamp.display_name,
            avatar_url=stamp.avatar_url,
            role=stamp.role,
        )


class CommentView(BaseModel):
    """A comment as seen by one (possibly anonymous) viewer."""

    comment_id: str
    post_id: str
    author: StampView
    content: str
    mentions: list[str]
    parent_id: str | None
    root_id: str
    path: str
    depth: int
    like_count: int
    reply_count: int
    total_reply_count: int
    is_liked: bool
    is_pinned: bool
    is_edited: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    edited_at: datetime | None

    @classmethod
    def from_comment(
        cls, comment: Comment, viewer_id: UserId | None = None
    ) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author=StampView.from_stamp(comment.author),
            content=comment.content,
            mentions=list(comment.mentions),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            root_id=str(comment.root_id),
            path=comment.path.root,
            depth=comment.depth,
            like_count=comment.like_count,
            reply_count=comment.reply_count,
            total_reply_count=comment.total_reply_count,
            is_liked=comment.is_liked_by(viewer_id),
            is_pinned=comment.is_pinned,
            is_edited=comment.is_edited,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            edited_at=comment.edited_at,
        )


class Pagination(BaseModel):
    """Position of a page within a listing."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_more: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_more=page < total_pages,
        )


def parse_user_id(value: str | None) -> UserId | None:
    """Parse an optional viewer id taken from an auth token."""
    return UserId(UUID(value)) if value else None
