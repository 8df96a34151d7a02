"""Post use cases."""

from .create_post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    PostView,
)
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "PostView",
]
