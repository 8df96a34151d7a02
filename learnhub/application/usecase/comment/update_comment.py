"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView
from learnhub.domain.service import CommentService, UserService
from learnhub.domain.value import CommentId, UserId


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # From authenticated user
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentView


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content.

    The editor's current role decides whether the edit window applies.
    """

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValueError: If an id is malformed
            NotFoundError: If the user or comment doesn't exist
            ContentDeletedException: If the comment was deleted
            NotAuthorizedError: If the user is not the author
            EditWindowExpiredError: If a student edits too late
        """
        user_id = UserId(UUID(request.user_id))
        comment_id = CommentId(UUID(request.comment_id))

        editor = await self.user_service.get_active_by_id(user_id)
        comment = await self.comment_service.edit_comment(
            comment_id=comment_id,
            editor_id=user_id,
            editor_role=editor.role,
            content=request.content,
        )
        return UpdateCommentResponse(comment=CommentView.from_comment(comment, user_id))
