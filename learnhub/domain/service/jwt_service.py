"""Auth token verification."""

import logfire

from learnhub.config import AuthSettings
from learnhub.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Reads the identity carried by an ``auth_token`` cookie.

    Tokens are issued elsewhere; this service never refreshes them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Decode ``token`` and return its claims.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("JWT token rejected", reason=str(e))
            raise

    def get_viewer(self, token: str | None) -> TokenPayload | None:
        """Claims of the caller, or None for anonymous and invalid tokens."""
        if not token:
            return None
        try:
            return self.verify_token(token)
        except JWTError:
            return None

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User id of the caller, or None when not authenticated."""
        viewer = self.get_viewer(token)
        return viewer.user_id if viewer else None
