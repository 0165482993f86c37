"""User use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    LeaderboardEntry,
)
from .get_user_rank import GetUserRankRequest, GetUserRankResponse, GetUserRankUseCase

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardResponse",
    "GetLeaderboardUseCase",
    "LeaderboardEntry",
    "GetUserRankRequest",
    "GetUserRankResponse",
    "GetUserRankUseCase",
]
