"""Joke use cases."""

from .get_best_joke import GetBestJokeUseCase
from .get_random_joke import GetRandomJokeUseCase, JokeResponse

__all__ = [
    "GetBestJokeUseCase",
    "GetRandomJokeUseCase",
    "JokeResponse",
]
