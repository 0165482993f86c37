"""Vote use cases."""

from .cast_vote import CastVoteResponse
from .rank_joke import RankJokeRequest, RankJokeUseCase
from .react_to_joke import ReactToJokeRequest, ReactToJokeUseCase

__all__ = [
    "CastVoteResponse",
    "RankJokeRequest",
    "RankJokeUseCase",
    "ReactToJokeRequest",
    "ReactToJokeUseCase",
]
