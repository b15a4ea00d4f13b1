"""Configuration providers."""

from dishka import Scope, provide

from learnhub.config import ModerationSettings, PaginationSettings, Settings
from learnhub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Per-listing default and maximum page sizes."""
        return settings.pagination

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        return settings.moderation
