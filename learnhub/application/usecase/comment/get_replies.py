"""List replies use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView, Pagination, parse_user_id
from learnhub.domain.service import CommentService
from learnhub.domain.value import CommentId, PostId


class GetRepliesRequest(BaseModel):
    """List replies request."""

    post_id: str
    comment_id: str
    page: int = 1
    limit: int | None = None
    viewer_id: str | None = None


class GetRepliesResponse(BaseModel):
    """One page of direct replies."""

    replies: list[CommentView]
    pagination: Pagination


class GetRepliesUseCase(BaseUseCase):
    """Use case for paging through the direct replies of a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        viewer_id = parse_user_id(request.viewer_id)
        page, limit = self.comment_service.page_bounds(request.page, request.limit)
        result = await self.comment_service.list_replies(
            PostId(UUID(request.post_id)),
            CommentId(UUID(request.comment_id)),
            page=page,
            limit=limit,
        )
        return GetRepliesResponse(
            replies=[CommentView.from_comment(r, viewer_id) for r in result.replies],
            pagination=Pagination.build(page, limit, result.total),
        )
