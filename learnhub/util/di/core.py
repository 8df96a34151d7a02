"""Configuration provider."""

from dishka import Scope, provide

from learnhub.config import AuthSettings, CommentSettings, Settings
from learnhub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the setting groups services depend on.

    Services ask for the narrowest group they need, so tests can build a
    service from a ``CommentSettings`` alone.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """JWT verification settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Thread depth, edit window, paging and preview limits."""
        return settings.comments
