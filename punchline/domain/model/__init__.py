"""Domain model entities for Punchline."""

from punchline.domain.model.joke import Joke
from punchline.domain.model.user import User
from punchline.domain.model.vote import Vote, VoteEvent, VoteOutcome

__all__ = [
    "Joke",
    "User",
    "Vote",
    "VoteEvent",
    "VoteOutcome",
]
