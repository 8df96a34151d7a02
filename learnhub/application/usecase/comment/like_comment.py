"""Like and unlike comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.service import CommentService, UserService
from learnhub.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like or unlike request."""

    comment_id: str
    user_id: str  # From authenticated user


class LikeCommentResponse(BaseModel):
    """Like state after the call."""

    comment_id: str
    like_count: int
    is_liked: bool


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking a comment. Liking twice changes nothing."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            ValueError: If an id is malformed
            NotFoundError: If the user or comment doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        liker = await self.user_service.get_active_by_id(user_id)
        like_count = await self.comment_service.like_comment(
            CommentId(UUID(request.comment_id)), liker.stamp()
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, like_count=like_count, is_liked=True
        )


class UnlikeCommentUseCase(BaseUseCase):
    """Use case for removing a like. Unliking without a like changes nothing."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        like_count = await self.comment_service.unlike_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, like_count=like_count, is_liked=False
        )
