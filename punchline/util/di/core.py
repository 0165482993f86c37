"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from punchline.config import RankingSettings, ScoringSettings, Settings
from punchline.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded once from environment variables and .env file and
    shared by reference for the life of the process.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide rank tier thresholds."""
        return settings.ranking

    @provide(scope=Scope.APP)
    def provide_scoring_settings(self, settings: Settings) -> ScoringSettings:
        """Provide vote source settings."""
        return settings.scoring

