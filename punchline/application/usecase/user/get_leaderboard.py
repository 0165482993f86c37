"""Get leaderboard use case."""

from pydantic import BaseModel, Field

from punchline.config import ScoringSettings
from punchline.domain.service import UserService
from punchline.domain.value import Rank


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    # Defaults to the configured leaderboard size
    limit: int | None = Field(default=None, ge=1, le=100)


class LeaderboardEntry(BaseModel):
    """One leaderboard row."""

    position: int
    user_id: str
    display_name: str
    score: int
    rank: Rank


class GetLeaderboardResponse(BaseModel):
    """Get leaderboard response."""

    entries: list[LeaderboardEntry]


class GetLeaderboardUseCase:
    """Use case for listing the top users by score."""

    def __init__(
        self, user_service: UserService, scoring_settings: ScoringSettings
    ) -> None:
        """Initialize get leaderboard use case.

        Args:
            user_service: User domain service
            scoring_settings: Provides the default leaderboard size
        """
        self.user_service = user_service
        self.scoring_settings = scoring_settings

    async def execute(self, request: GetLeaderboardRequest) -> GetLeaderboardResponse:
        """Execute get leaderboard flow.

        Args:
            request: Request with optional limit

        Returns:
            Leaderboard entries, highest score first
        """
        limit = request.limit or self.scoring_settings.leaderboard_size
        users = await self.user_service.get_leaderboard(limit)

        return GetLeaderboardResponse(
            entries=[
                LeaderboardEntry(
                    position=position,
                    user_id=user.id,
                    display_name=user.display_name,
                    score=user.score,
                    rank=user.rank,
                )
                for position, user in enumerate(users, start=1)
            ]
        )
