"""Notification routes. All require authentication."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from learnhub.application.usecase.notification import (
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkAllReadResponse,
    MarkNotificationReadUseCase,
    NotificationActionRequest,
    NotificationView,
    UnreadCountResponse,
)
from learnhub.domain.service import JWTService
from learnhub.interface.api.auth import require_user_id
from learnhub.interface.api.envelope import ApiResponse, ok

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ApiResponse[ListNotificationsResponse])
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1),
    limit: int | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[ListNotificationsResponse]:
    """List the caller's notifications, newest first (limit capped at 50)."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    request = ListNotificationsRequest(user_id=user_id, page=page, limit=limit)
    return ok(await list_notifications_use_case.execute(request))


@router.get("/unread-count", response_model=ApiResponse[UnreadCountResponse])
async def unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[UnreadCountResponse]:
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return ok(await get_unread_count_use_case.execute(user_id))


@router.patch("/read-all", response_model=ApiResponse[MarkAllReadResponse])
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[MarkAllReadResponse]:
    """Mark every unread notification read; returns how many changed."""
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    return ok(await mark_all_read_use_case.execute(user_id))


@router.patch("/{notification_id}/read", response_model=ApiResponse[NotificationView])
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[NotificationView]:
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    request = NotificationActionRequest(notification_id=notification_id, user_id=user_id)
    return ok(await mark_read_use_case.execute(request))


@router.delete(
    "/{notification_id}", response_model=ApiResponse[DeleteNotificationResponse]
)
async def delete_notification(
    notification_id: str,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ApiResponse[DeleteNotificationResponse]:
    user_id = require_user_id(jwt_service, auth_token, "delete notifications")
    request = NotificationActionRequest(notification_id=notification_id, user_id=user_id)
    return ok(await delete_notification_use_case.execute(request))
