"""List root comments use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.application.usecase.schema import CommentView, Pagination, parse_user_id
from learnhub.domain.service import CommentService
from learnhub.domain.value import CommentSort, PostId


class CommentThreadView(CommentView):
    """A root comment with a preview of its direct replies."""

    replies: list[CommentView]
    has_more_replies: bool


class GetCommentsRequest(BaseModel):
    """List root comments request."""

    post_id: str  # UUID string
    page: int = 1
    limit: int | None = None
    sort: CommentSort = CommentSort.NEWEST
    viewer_id: str | None = None  # From auth token, if any


class GetCommentsResponse(BaseModel):
    """One page of root comments."""

    comments: list[CommentThreadView]
    pinned_comment: CommentView | None
    pagination: Pagination


class GetCommentsUseCase(BaseUseCase):
    """Use case for the top-level comment listing of a post.

    Each root carries its first replies; ``is_liked`` is computed for the
    viewer (always False for anonymous readers).
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        post_id = PostId(UUID(request.post_id))
        viewer_id = parse_user_id(request.viewer_id)
        page, limit = self.comment_service.page_bounds(request.page, request.limit)

        result = await self.comment_service.list_root_comments(
            post_id, page=page, limit=limit, sort=request.sort
        )

        comments = [
            CommentThreadView(
                **CommentView.from_comment(thread.comment, viewer_id).model_dump(),
                replies=[CommentView.from_comment(r, viewer_id) for r in thread.replies],
                has_more_replies=thread.has_more_replies,
            )
            for thread in result.threads
        ]
        pinned = (
            CommentView.from_comment(result.pinned, viewer_id)
            if result.pinned
            else None
        )
        return GetCommentsResponse(
            comments=comments,
            pinned_comment=pinned,
            pagination=Pagination.build(page, limit, result.total),
        )
