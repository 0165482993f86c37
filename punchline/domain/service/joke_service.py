"""Joke domain service."""

import logfire

from punchline.domain.model.joke import Joke
from punchline.domain.repository import JokeRepository

from .base import Service


class JokeService(Service):
    """Domain service for joke operations."""

    def __init__(self, joke_repository: JokeRepository) -> None:
        """Initialize joke service.

        Args:
            joke_repository: Joke repository
        """
        self.joke_repository = joke_repository

    async def add_points(self, snapshot: Joke, points: int) -> Joke:
        """Atomically add points to a joke, creating it from the snapshot if absent.

        Uses a store-level upsert-with-increment to avoid lost updates.

        Args:
            snapshot: Joke fields captured from the vote event
            points: Signed points to add

        Returns:
            The stored joke after the increment
        """
        with logfire.span(
            "joke_service.add_points", joke_id=snapshot.id, points=points
        ):
            joke = await self.joke_repository.add_points(snapshot, points)
            logfire.info("Joke points added", joke_id=joke.id, score=joke.score)
            return joke

    async def get_random(self) -> Joke | None:
        """Pick a random scored joke."""
        with logfire.span("joke_service.get_random"):
            joke = await self.joke_repository.find_random()
            if not joke:
                logfire.info("No jokes stored yet")
            return joke

    async def get_best(self) -> Joke | None:
        """Get the highest scoring joke."""
        with logfire.span("joke_service.get_best"):
            joke = await self.joke_repository.find_best()
            if joke:
                logfire.info("Best joke found", joke_id=joke.id, score=joke.score)
            else:
                logfire.info("No jokes ranked yet")
            return joke
