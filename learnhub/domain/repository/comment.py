"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from learnhub.domain.model.comment import Comment
from learnhub.domain.value import (
    CommentId,
    CommentSort,
    PostId,
    StampPatch,
    UserId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Every counter and membership change is a single conditional update so
    concurrent requests never lose or double-count an update.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Batch-fetch comments by ID, in no particular order.

        Args:
            comment_ids: Comment IDs to fetch

        Returns:
            The comments that exist
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert (id and path already set)

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_roots(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find non-deleted top-level comments of a post.

        Args:
            post_id: The post ID
            sort: Sort order
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            One page of top-level comments
        """
        pass

    @abstractmethod
    async def count_roots(self, post_id: PostId) -> int:
        """Count non-deleted top-level comments of a post."""
        pass

    @abstractmethod
    async def find_pinned(self, post_id: PostId) -> Optional[Comment]:
        """Find the pinned, non-deleted comment of a post, if any."""
        pass

    @abstractmethod
    async def find_replies_to(
        self,
        post_id: PostId,
        parent_ids: Sequence[CommentId],
        limit: int = 100,
    ) -> List[Comment]:
        """Fetch non-deleted direct replies of several comments in one query.

        Args:
            post_id: The post the parents belong to
            parent_ids: Parent comment IDs
            limit: Maximum number of replies across all parents

        Returns:
            Replies ordered by creation time (oldest first)
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of non-deleted direct replies, oldest first."""
        pass

    @abstractmethod
    async def count_replies(self, parent_id: CommentId) -> int:
        """Count non-deleted direct replies of a comment."""
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically add one direct reply and one descendant to a comment."""
        pass

    @abstractmethod
    async def increment_total_reply_count(self, comment_id: CommentId) -> None:
        """Atomically add one descendant to a comment."""
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> Optional[int]:
        """Add a like if the user has not liked the comment yet.

        Matches only a non-deleted comment whose likes do not contain the
        user, then adds the user and increments the counter in the same
        update.

        Args:
            comment_id: The comment ID
            user_id: The liking user

        Returns:
            The new like count, or None when nothing matched
        """
        pass

    @abstractmethod
    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[int]:
        """Remove a like if present. Symmetric to ``add_like``.

        Returns:
            The new like count, or None when nothing matched
        """
        pass

    @abstractmethod
    async def update_content(
        self,
        comment_id: CommentId,
        content: str,
        mentions: List[str],
        edited_at: datetime,
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment.

        Returns:
            Updated comment, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment deleted unless it already is.

        Returns:
            The comment after the call (unchanged if already deleted),
            or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def unpin_all(self, post_id: PostId) -> None:
        """Clear the pinned flag on every comment of a post."""
        pass

    @abstractmethod
    async def set_pinned(
        self, comment_id: CommentId, pinned: bool
    ) -> Optional[Comment]:
        """Set the pinned flag of a single comment.

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every comment authored by a user.

        Returns:
            Number of comments updated
        """
        pass
