"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from learnhub.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    PinCommentRequest,
    PinCommentResponse,
    PinCommentUseCase,
    UnlikeCommentUseCase,
    UnpinCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from learnhub.domain.service import JWTService
from learnhub.domain.value import CommentSort
from learnhub.interface.api.auth import optional_user_id, require_user_id
from learnhub.interface.api.envelope import ApiResponse, ok

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Length limits are enforced after sanitising, in the domain.
    """

    post_id: str
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str


@router.get(
    "/post/{post_id}", response_model=ApiResponse[GetCommentsResponse]
)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    sort: CommentSort = Query(default=CommentSort.NEWEST),
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[GetCommentsResponse]:
    """Get one page of top-level comments of a post.

    Each root carries up to three replies; the pinned comment is returned
    separately. If authenticated, ``is_liked`` reflects the viewer.

    Args:
        post_id: Post UUID
        get_comments_use_case: List comments use case from DI
        jwt_service: JWT service for optional viewer identification
        page: 1-based page number
        limit: Page size (default 10, capped at 50)
        sort: newest, oldest, popular or discussed
        auth_token: JWT token from cookie (optional)
    """
    request = GetCommentsRequest(
        post_id=post_id,
        page=page,
        limit=limit,
        sort=sort,
        viewer_id=optional_user_id(jwt_service, auth_token),
    )
    return ok(await get_comments_use_case.execute(request))


@router.get(
    "/post/{post_id}/replies/{comment_id}",
    response_model=ApiResponse[GetRepliesResponse],
)
async def get_replies(
    post_id: str,
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[GetRepliesResponse]:
    """Get one page of direct replies to a comment, oldest first."""
    request = GetRepliesRequest(
        post_id=post_id,
        comment_id=comment_id,
        page=page,
        limit=limit,
        viewer_id=optional_user_id(jwt_service, auth_token),
    )
    return ok(await get_replies_use_case.execute(request))


@router.get("/{comment_id}", response_model=ApiResponse[GetCommentResponse])
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    context: bool = Query(default=True),
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[GetCommentResponse]:
    """Get a single comment, with its ancestors unless ``context=false``."""
    request = GetCommentRequest(
        comment_id=comment_id,
        with_context=context,
        viewer_id=optional_user_id(jwt_service, auth_token),
    )
    return ok(await get_comment_use_case.execute(request))


@router.post(
    "",
    response_model=ApiResponse[CreateCommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[CreateCommentResponse]:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment with the author's identity stamp
    """
    user_id = require_user_id(jwt_service, auth_token, "create comments")
    use_case_request = CreateCommentRequest(
        post_id=request.post_id,
        content=request.content,
        author_id=user_id,
        parent_id=request.parent_id,
    )
    return ok(await create_comment_use_case.execute(use_case_request))


@router.put("/{comment_id}", response_model=ApiResponse[UpdateCommentResponse])
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[UpdateCommentResponse]:
    """Edit a comment's content.

    Only the author can edit. Students may edit for 15 minutes after
    posting; teachers at any time.
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")
    use_case_request = UpdateCommentRequest(
        comment_id=comment_id, user_id=user_id, content=request.content
    )
    return ok(await update_comment_use_case.execute(use_case_request))


@router.delete("/{comment_id}", response_model=ApiResponse[DeleteCommentResponse])
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[DeleteCommentResponse]:
    """Soft-delete one's own comment."""
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    return ok(
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    )


@router.post("/{comment_id}/like", response_model=ApiResponse[LikeCommentResponse])
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[LikeCommentResponse]:
    """Like a comment. Liking an already liked comment is a no-op."""
    user_id = require_user_id(jwt_service, auth_token, "like comments")
    return ok(
        await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    )


@router.delete("/{comment_id}/like", response_model=ApiResponse[LikeCommentResponse])
async def unlike_comment(
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[LikeCommentResponse]:
    """Remove one's like from a comment."""
    user_id = require_user_id(jwt_service, auth_token, "unlike comments")
    return ok(
        await unlike_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    )


@router.post("/{comment_id}/pin", response_model=ApiResponse[PinCommentResponse])
async def pin_comment(
    comment_id: str,
    pin_comment_use_case: FromDishka[PinCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[PinCommentResponse]:
    """Pin a comment on one's own post. Teachers only."""
    user_id = require_user_id(jwt_service, auth_token, "pin comments")
    return ok(
        await pin_comment_use_case.execute(
            PinCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    )


@router.delete("/{comment_id}/pin", response_model=ApiResponse[PinCommentResponse])
async def unpin_comment(
    comment_id: str,
    unpin_comment_use_case: FromDishka[UnpinCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[PinCommentResponse]:
    """Unpin a comment on one's own post. Teachers only."""
    user_id = require_user_id(jwt_service, auth_token, "unpin comments")
    return ok(
        await unpin_comment_use_case.execute(
            PinCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    )
