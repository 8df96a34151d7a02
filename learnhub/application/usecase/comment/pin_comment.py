"""Pin and unpin comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView
from learnhub.domain.service import CommentService, UserService
from learnhub.domain.value import CommentId, UserId


class PinCommentRequest(BaseModel):
    """Pin or unpin request."""

    comment_id: str
    user_id: str  # From authenticated user


class PinCommentResponse(BaseModel):
    """The comment after the pin state changed."""

    comment: CommentView


class PinCommentUseCase(BaseUseCase):
    """Use case for pinning a comment on one's own post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: PinCommentRequest) -> PinCommentResponse:
        """Execute pin flow.

        The actor's stored role is used, not the one in the token.

        Raises:
            ValueError: If an id is malformed
            NotAuthorizedError: If the actor is not a teacher or not the post author
            NotFoundError: If the user, comment or post doesn't exist
        """
        user_id = UserId(UUID(request.user_id))
        actor = await self.user_service.get_active_by_id(user_id)
        comment = await self.comment_service.pin_comment(
            CommentId(UUID(request.comment_id)), actor.stamp()
        )
        return PinCommentResponse(comment=CommentView.from_comment(comment, user_id))


class UnpinCommentUseCase(BaseUseCase):
    """Use case for unpinning a comment on one's own post."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: PinCommentRequest) -> PinCommentResponse:
        user_id = UserId(UUID(request.user_id))
        actor = await self.user_service.get_active_by_id(user_id)
        comment = await self.comment_service.unpin_comment(
            CommentId(UUID(request.comment_id)), actor.stamp()
        )
        return PinCommentResponse(comment=CommentView.from_comment(comment, user_id))
