"""In-memory post repository for testing."""

from typing import Optional

from learnhub.domain.model.post import Post
from learnhub.domain.repository.post import PostRepository
from learnhub.domain.value import PostId, StampPatch, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        """Save or update a post, keeping the stored comment counter."""
        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(update={"comment_count": existing.comment_count})
        self._posts[post.id] = post
        return post

    async def increment_comment_count(self, post_id: PostId, amount: int = 1) -> None:
        """Add to the comment counter."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + amount}
            )

    async def update_author_stamp(self, user_id: UserId, patch: StampPatch) -> int:
        """Apply a profile change to every post by the user."""
        if patch.is_empty():
            return 0
        updated = 0
        for post in list(self._posts.values()):
            if post.author.user_id == user_id:
                self._posts[post.id] = post.model_copy(
                    update={"author": patch.apply(post.author)}
                )
                updated += 1
        return updated
