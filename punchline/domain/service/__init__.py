"""Domain services."""

from .base import Service
from .joke_service import JokeService
from .rank_policy import RankPolicy
from .scoring_service import ScoringService
from .user_service import UserService
from .vote_policy import VotePolicy

__all__ = [
    "JokeService",
    "RankPolicy",
    "ScoringService",
    "Service",
    "UserService",
    "VotePolicy",
]
