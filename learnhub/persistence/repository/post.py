"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.model import Post
from learnhub.domain.repository import PostRepository
from learnhub.domain.value import PostId, StampPatch, UserId
from learnhub.persistence.mappers import post_to_dict, row_to_post, stamp_patch_to_dict
from learnhub.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        The comment counter is never overwritten on update; it only moves
        through ``increment_comment_count``.
        """
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            post_dict.pop("comment_count")
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(post.id) or post

    async def increment_comment_count(self, post_id: PostId, amount: int = 1) -> None:
        """Atomically add to the comment counter."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + amount)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every post by the user."""
        if patch.is_empty():
            return 0
        stmt = (
            update(posts_table)
            .where(posts_table.c.author_id == user_id)
            .values(**stamp_patch_to_dict(patch, "author"))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
