"""Auth token encoding.

Tokens are issued by the auth service and arrive in the ``auth_token``
cookie as HS256 JWTs carrying ``user_id``, ``username``, ``role`` and
``exp``. ``create_token`` is used by local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from learnhub.config import AuthSettings
from learnhub.domain.value import Role


class TokenPayload(BaseModel):
    """Claims of an auth token."""

    user_id: str
    username: str
    role: Role
    exp: datetime


class JWTError(Exception):
    """Token cannot be trusted."""


def create_token(
    user_id: str,
    username: str,
    role: Role,
    settings: AuthSettings,
    expires_in: timedelta | None = None,
) -> str:
    """Encode a signed token for a user.

    ``expires_in`` defaults to ``settings.jwt_expiry_days``.
    """
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {
        "user_id": user_id,
        "username": username,
        "role": role.value,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token is expired, forged or lacks a claim
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token is missing claims") from e
