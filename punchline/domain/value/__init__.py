"""Domain value objects for Punchline."""

from punchline.domain.value.identifiers import JokeId, UserId
from punchline.domain.value.types import (
    MAX_POINTS,
    MIN_POINTS,
    Comparison,
    Rank,
    RankTransition,
    VoteStatus,
)

__all__ = [
    # Identifiers
    "JokeId",
    "UserId",
    # Types
    "Comparison",
    "Rank",
    "RankTransition",
    "VoteStatus",
    "MIN_POINTS",
    "MAX_POINTS",
]
