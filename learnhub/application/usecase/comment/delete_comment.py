"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.service import CommentService
from learnhub.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # From authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        comment = await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id), deleted=comment.is_deleted
        )
