"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from learnhub.domain.model.comment import Comment
from learnhub.domain.repository.comment import CommentRepository
from learnhub.domain.value import CommentId, CommentSort, PostId, StampPatch, UserId


def _sort_key(sort: CommentSort):
    if sort == CommentSort.OLDEST:
        return lambda c: c.created_at
    if sort == CommentSort.POPULAR:
        return lambda c: (-c.like_count, -c.created_at.timestamp())
    if sort == CommentSort.DISCUSSED:
        return lambda c: (-c.total_reply_count, -c.created_at.timestamp())
    return lambda c: -c.created_at.timestamp()


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _replace(self, comment_id: CommentId, **changes) -> Comment:
        updated = self._comments[comment_id].model_copy(update=changes)
        self._comments[comment_id] = updated
        return updated

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Batch-fetch comments by ID."""
        return [self._comments[i] for i in comment_ids if i in self._comments]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    def _live_roots(self, post_id: PostId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id is None and c.deleted_at is None
        ]

    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of non-deleted top-level comments."""
        roots = sorted(self._live_roots(post_id), key=_sort_key(sort))
        return roots[offset : offset + limit]

    async def count_roots(self, post_id: PostId) -> int:
        """Count non-deleted top-level comments."""
        return len(self._live_roots(post_id))

    async def find_pinned(self, post_id: PostId) -> Optional[Comment]:
        """Find the pinned, non-deleted comment of a post."""
        return next(
            (
                c
                for c in self._comments.values()
                if c.post_id == post_id and c.is_pinned and c.deleted_at is None
            ),
            None,
        )

    async def find_replies_to(
        self,
        post_id: PostId,
        parent_ids: Sequence[CommentId],
        limit: int = 100,
    ) -> list[Comment]:
        """Fetch direct replies of several comments."""
        wanted = set(parent_ids)
        replies = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.parent_id in wanted and c.deleted_at is None
        ]
        replies.sort(key=lambda c: c.created_at)
        return replies[:limit]

    def _live_replies(self, parent_id: CommentId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and c.deleted_at is None
        ]

    async def find_replies(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of direct replies, oldest first."""
        replies = sorted(self._live_replies(parent_id), key=lambda c: c.created_at)
        return replies[offset : offset + limit]

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count non-deleted direct replies."""
        return len(self._live_replies(parent_id))

    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Add one direct reply and one descendant."""
        comment = self._comments.get(comment_id)
        if comment:
            self._replace(
                comment_id,
                reply_count=comment.reply_count + 1,
                total_reply_count=comment.total_reply_count + 1,
            )

    async def increment_total_reply_count(self, comment_id: CommentId) -> None:
        """Add one descendant."""
        comment = self._comments.get(comment_id)
        if comment:
            self._replace(comment_id, total_reply_count=comment.total_reply_count + 1)

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[int]:
        """Add a like unless the user already liked the comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted or user_id in comment.liked_by:
            return None
        updated = self._replace(
            comment_id,
            liked_by=comment.liked_by | {user_id},
            like_count=comment.like_count + 1,
        )
        return updated.like_count

    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[int]:
        """Remove a like if the user had liked the comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted or user_id not in comment.liked_by:
            return None
        updated = self._replace(
            comment_id,
            liked_by=comment.liked_by - {user_id},
            like_count=comment.like_count - 1,
        )
        return updated.like_count

    async def update_content(
        self,
        comment_id: CommentId,
        content: str,
        mentions: list[str],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        return self._replace(
            comment_id,
            content=content,
            mentions=list(mentions),
            edited_at=edited_at,
            updated_at=edited_at,
        )

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Set ``deleted_at`` unless already set."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        if comment.is_deleted:
            return comment
        return self._replace(comment_id, deleted_at=deleted_at, updated_at=deleted_at)

    async def unpin_all(self, post_id: PostId) -> None:
        """Clear the pinned flag on every comment of a post."""
        for comment in list(self._comments.values()):
            if comment.post_id == post_id and comment.is_pinned:
                self._replace(comment.id, is_pinned=False)

    async def set_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of one comment."""
        if comment_id not in self._comments:
            return None
        return self._replace(comment_id, is_pinned=pinned)

    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every comment by the user."""
        if patch.is_empty():
            return 0
        updated = 0
        for comment in list(self._comments.values()):
            if comment.author.user_id == user_id:
                self._replace(comment.id, author=patch.apply(comment.author))
                updated += 1
        return updated
