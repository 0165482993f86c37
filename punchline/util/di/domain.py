"""Domain layer DI providers."""

from dishka import Scope, provide

from punchline.config import RankingSettings, ScoringSettings
from punchline.domain.repository import JokeRepository, UserRepository, VoteRepository
from punchline.domain.service import (
    JokeService,
    RankPolicy,
    ScoringService,
    UserService,
    VotePolicy,
)
from punchline.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services holding repositories are REQUEST-scoped to align with the
    repository/session lifecycle: each incoming event gets its own session.
    The two policies are pure and live for the whole application.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rank_policy(self, ranking_settings: RankingSettings) -> RankPolicy:
        """Provide rank policy."""
        return RankPolicy(ranking_settings=ranking_settings)

    @provide(scope=Scope.APP)
    def get_vote_policy(self, scoring_settings: ScoringSettings) -> VotePolicy:
        """Provide vote policy."""
        return VotePolicy(scoring_settings=scoring_settings)

    @provide
    def get_joke_service(self, joke_repository: JokeRepository) -> JokeService:
        """Provide joke domain service."""
        return JokeService(joke_repository=joke_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_scoring_service(
        self,
        vote_repository: VoteRepository,
        joke_service: JokeService,
        user_service: UserService,
        rank_policy: RankPolicy,
    ) -> ScoringService:
        """Provide scoring domain service."""
        return ScoringService(
            vote_repository=vote_repository,
            joke_service=joke_service,
            user_service=user_service,
            rank_policy=rank_policy,
        )
