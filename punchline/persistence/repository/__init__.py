"""PostgreSQL repository implementations."""

from punchline.persistence.repository.joke import PostgresJokeRepository
from punchline.persistence.repository.user import PostgresUserRepository
from punchline.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresJokeRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
