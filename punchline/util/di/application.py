"""Application layer DI providers."""

from dishka import Scope, provide

from punchline.application.usecase.joke import GetBestJokeUseCase, GetRandomJokeUseCase
from punchline.application.usecase.user import GetLeaderboardUseCase, GetUserRankUseCase
from punchline.application.usecase.vote import RankJokeUseCase, ReactToJokeUseCase
from punchline.config import ScoringSettings
from punchline.domain.service import JokeService, ScoringService, UserService, VotePolicy
from punchline.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_rank_joke_use_case(
        self, vote_policy: VotePolicy, scoring_service: ScoringService
    ) -> RankJokeUseCase:
        """Provide rank joke use case."""
        return RankJokeUseCase(vote_policy=vote_policy, scoring_service=scoring_service)

    @provide(scope=Scope.REQUEST)
    def get_react_to_joke_use_case(
        self, vote_policy: VotePolicy, scoring_service: ScoringService
    ) -> ReactToJokeUseCase:
        """Provide react to joke use case."""
        return ReactToJokeUseCase(
            vote_policy=vote_policy, scoring_service=scoring_service
        )

    # Joke use cases
    @provide(scope=Scope.REQUEST)
    def get_random_joke_use_case(self, joke_service: JokeService) -> GetRandomJokeUseCase:
        """Provide get random joke use case."""
        return GetRandomJokeUseCase(joke_service=joke_service)

    @provide(scope=Scope.REQUEST)
    def get_best_joke_use_case(self, joke_service: JokeService) -> GetBestJokeUseCase:
        """Provide get best joke use case."""
        return GetBestJokeUseCase(joke_service=joke_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, user_service: UserService, scoring_settings: ScoringSettings
    ) -> GetLeaderboardUseCase:
        """Provide get leaderboard use case."""
        return GetLeaderboardUseCase(
            user_service=user_service, scoring_settings=scoring_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_user_rank_use_case(self, user_service: UserService) -> GetUserRankUseCase:
        """Provide get user rank use case."""
        return GetUserRankUseCase(user_service=user_service)
