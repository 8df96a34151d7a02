"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView
from learnhub.domain.service import CommentService, UserService
from learnhub.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentView


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (author stamp)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the author and take their identity stamp
        2. Create comment via comment service (validates post, parent, depth)

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValueError: If an id is malformed
            NotFoundError: If the author, post or parent doesn't exist
            ValidationError: If the content, parent or depth is invalid
        """
        author_id = UserId(UUID(request.author_id))
        post_id = PostId(UUID(request.post_id))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        author = await self.user_service.get_active_by_id(author_id)
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=author.stamp(),
            content=request.content,
            parent_id=parent_id,
        )
        return CreateCommentResponse(
            comment=CommentView.from_comment(comment, author_id)
        )
