"""Configuration providers."""

from dishka import Scope, provide

from board.config import AuthSettings, CommentSettings, Settings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on directly.

    Everything is APP-scoped: the environment is read once per container.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments
