"""Create post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import StampView
from learnhub.domain.model import Post
from learnhub.domain.service import PostService, UserService
from learnhub.domain.value import UserId, UserStat


class PostView(BaseModel):
    """A post as returned to clients."""

    post_id: str
    author: StampView
    content: str
    comment_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            post_id=str(post.id),
            author=StampView.from_stamp(post.author),
            content=post.content,
            comment_count=post.comment_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # From authenticated user
    content: str


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostView


class CreatePostUseCase(BaseUseCase):
    """Use case for a teacher publishing a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Load the author (role and stamp)
        2. Create the post (teachers only)
        3. Count the post in the author's stats

        Raises:
            ValueError: If the author id is malformed
            NotFoundError: If the author doesn't exist
            NotAuthorizedError: If the author is not a teacher
            ValidationError: If the content is invalid
        """
        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_active_by_id(author_id)
        post = await self.post_service.create_post(author, request.content)
        await self.user_service.increment_stat(author_id, UserStat.POSTS_COUNT)
        return CreatePostResponse(post=PostView.from_post(post))
