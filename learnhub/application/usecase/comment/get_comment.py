"""Get single comment (deep link) use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView, parse_user_id
from learnhub.domain.service import CommentService
from learnhub.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str
    with_context: bool = True
    viewer_id: str | None = None


class GetCommentResponse(BaseModel):
    """A comment and, with context, the chain above it."""

    comment: CommentView
    ancestors: list[CommentView]


class GetCommentUseCase(BaseUseCase):
    """Use case for opening a comment from a link.

    With context, ancestors are returned root first so a client can render
    the thread down to the linked comment.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        viewer_id = parse_user_id(request.viewer_id)
        context = await self.comment_service.get_comment_with_context(
            CommentId(UUID(request.comment_id)), with_context=request.with_context
        )
        return GetCommentResponse(
            comment=CommentView.from_comment(context.comment, viewer_id),
            ancestors=[
                CommentView.from_comment(a, viewer_id) for a in context.ancestors
            ],
        )
