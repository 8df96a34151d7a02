"""Post domain service."""

from uuid import uuid4

import logfire

from learnhub.domain.error import NotAuthorizedError, NotFoundError
from learnhub.domain.model import Post, User
from learnhub.domain.model.common import utcnow
from learnhub.domain.repository import PostRepository
from learnhub.domain.value import PostId

from .base import Service
from .content import sanitize_content

MAX_POST_LENGTH = 10000


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author: User, content: str) -> Post:
        """Publish a new post.

        Only teachers may publish posts.

        Args:
            author: Author of the post
            content: Raw post text

        Returns:
            Created post

        Raises:
            NotAuthorizedError: If the author is not a teacher
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author.id),
            role=author.role.value,
        ):
            if not author.role.is_elevated:
                logfire.warn(
                    "Post creation denied for role",
                    author_id=str(author.id),
                    role=author.role.value,
                )
                raise NotAuthorizedError("post", "", str(author.id), action="create")

            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author=author.stamp(),
                content=sanitize_content(content, MAX_POST_LENGTH, "Post content"),
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_active_post(self, post_id: PostId) -> Post:
        """Get a post that has not been deleted.

        Raises:
            NotFoundError: If the post doesn't exist or is deleted
        """
        post = await self.get_post_by_id(post_id)
        if post is None or post.is_deleted:
            raise NotFoundError("Post", str(post_id))
        return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment counter.

        Args:
            post_id: Post ID
        """
        with logfire.span(
            "post_service.increment_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.increment_comment_count(post_id)
            logfire.info("Post comment count incremented", post_id=str(post_id))
