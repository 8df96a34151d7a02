"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.model.post import Post
from learnhub.domain.value import PostId, StampPatch, UserId


class PostRepository(ABC):
    """Storage for class posts.

    Posts are only soft-deleted, so lookups return deleted posts too and
    callers decide what a deleted post means to them.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Post with this id, deleted or not."""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert a post, or update it keeping the stored comment counter."""

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId, amount: int = 1) -> None:
        """Add ``amount`` to ``comment_count`` in a single atomic update."""

    @abstractmethod
    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Rewrite the author stamp of every post by ``user_id``.

        Returns:
            Number of posts changed
        """
