"""In-memory repository implementations for testing."""

from .joke import InMemoryJokeRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryJokeRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
