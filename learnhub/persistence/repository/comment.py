"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Comment
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import CommentRepository
from learnhub.domain.value import (
    CommentId,
    CommentSort,
    PostId,
    StampPatch,
    UserId,
)
from learnhub.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    stamp_patch_to_dict,
)
from learnhub.persistence.tables import comments_table

c = comments_table.c

SORT_ORDER = {
    CommentSort.NEWEST: [desc(c.created_at)],
    CommentSort.OLDEST: [c.created_at],
    CommentSort.POPULAR: [desc(c.like_count), desc(c.created_at)],
    CommentSort.DISCUSSED: [desc(c.total_reply_count), desc(c.created_at)],
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[Comment]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def _fetch_all(self, stmt) -> List[Comment]:
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return await self._fetch_one(select(comments_table).where(c.id == comment_id))

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Batch-fetch comments by ID."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(c.id.in_(list(comment_ids)))
        return await self._fetch_all(stmt)

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment with its complete path."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    def _live_roots(self, post_id: PostId):
        return (
            select(comments_table)
            .where(c.post_id == post_id)
            .where(c.parent_id.is_(None))
            .where(c.deleted_at.is_(None))
        )

    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of non-deleted top-level comments."""
        stmt = (
            self._live_roots(post_id)
            .order_by(*SORT_ORDER[sort])
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_roots(self, post_id: PostId) -> int:
        """Count non-deleted top-level comments."""
        stmt = select(func.count()).select_from(self._live_roots(post_id).subquery())
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_pinned(self, post_id: PostId) -> Optional[Comment]:
        """Find the pinned, non-deleted comment of a post."""
        stmt = (
            select(comments_table)
            .where(c.post_id == post_id)
            .where(c.is_pinned.is_(True))
            .where(c.deleted_at.is_(None))
            .limit(1)
        )
        return await self._fetch_one(stmt)

    async def find_replies_to(
        self,
        post_id: PostId,
        parent_ids: Sequence[CommentId],
        limit: int = 100,
    ) -> List[Comment]:
        """Fetch direct replies of several comments in one query."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(c.post_id == post_id)
            .where(c.parent_id.in_(list(parent_ids)))
            .where(c.deleted_at.is_(None))
            .order_by(c.created_at)
            .limit(limit)
        )
        return await self._fetch_all(stmt)

    def _live_replies(self, parent_id: CommentId):
        return (
            select(comments_table)
            .where(c.parent_id == parent_id)
            .where(c.deleted_at.is_(None))
        )

    async def find_replies(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of direct replies, oldest first."""
        stmt = (
            self._live_replies(parent_id)
            .order_by(c.created_at)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count non-deleted direct replies."""
        stmt = select(func.count()).select_from(
            self._live_replies(parent_id).subquery()
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically add one direct reply and one descendant."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(
                reply_count=c.reply_count + 1,
                total_reply_count=c.total_reply_count + 1,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_total_reply_count(self, comment_id: CommentId) -> None:
        """Atomically add one descendant."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(total_reply_count=c.total_reply_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[int]:
        """Add a like in one conditional UPDATE."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .where(c.deleted_at.is_(None))
            .where(~c.liked_by.any(user_id))
            .values(
                liked_by=func.array_append(c.liked_by, user_id, type_=c.liked_by.type),
                like_count=c.like_count + 1,
            )
            .returning(c.like_count)
        )
        result = await self.session.execute(stmt)
        count = result.scalar_one_or_none()
        await self.session.flush()
        return count

    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[int]:
        """Remove a like in one conditional UPDATE."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .where(c.deleted_at.is_(None))
            .where(c.liked_by.any(user_id))
            .values(
                liked_by=func.array_remove(c.liked_by, user_id, type_=c.liked_by.type),
                like_count=c.like_count - 1,
            )
            .returning(c.like_count)
        )
        result = await self.session.execute(stmt)
        count = result.scalar_one_or_none()
        await self.session.flush()
        return count

    async def update_content(
        self,
        comment_id: CommentId,
        content: str,
        mentions: List[str],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .where(c.deleted_at.is_(None))
            .values(
                content=content,
                mentions=mentions,
                edited_at=edited_at,
                updated_at=edited_at,
            )
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Set ``deleted_at`` unless already set."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .where(c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment_id)

    async def unpin_all(self, post_id: PostId) -> None:
        """Clear the pinned flag on every comment of a post."""
        stmt = (
            update(comments_table)
            .where(c.post_id == post_id)
            .where(c.is_pinned.is_(True))
            .values(is_pinned=False)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of one comment."""
        stmt = (
            update(comments_table)
            .where(c.id == comment_id)
            .values(is_pinned=pinned, updated_at=utcnow())
            .returning(comments_table)
        )
        updated = await self._fetch_one(stmt)
        await self.session.flush()
        return updated

    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every comment by the user."""
        if patch.is_empty():
            return 0
        stmt = (
            update(comments_table)
            .where(c.author_id == user_id)
            .values(**stamp_patch_to_dict(patch, "author"))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
