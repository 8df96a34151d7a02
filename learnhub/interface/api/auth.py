"""Cookie authentication helpers for routes."""

from fastapi import HTTPException, status

from learnhub.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """User id from a valid ``auth_token`` cookie.

    Raises:
        HTTPException: 401 when the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def optional_user_id(jwt_service: JWTService, auth_token: str | None) -> str | None:
    """User id of the viewer, or None for anonymous readers."""
    return jwt_service.get_user_id_from_token(auth_token)
