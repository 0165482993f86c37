"""Repository interfaces for the Punchline domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from punchline.domain.repository.joke import JokeRepository
from punchline.domain.repository.user import UserRepository
from punchline.domain.repository.vote import VoteRepository

__all__ = [
    "JokeRepository",
    "UserRepository",
    "VoteRepository",
]
