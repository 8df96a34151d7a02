"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from learnhub.application.usecase.base import BaseUseCase
from learnhub.domain.service import PostService
from learnhub.domain.value import PostId

from .create_post import PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostView


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            ValueError: If the id is malformed
            NotFoundError: If the post doesn't exist or is deleted
        """
        post = await self.post_service.get_active_post(PostId(UUID(request.post_id)))
        return GetPostResponse(post=PostView.from_post(post))
