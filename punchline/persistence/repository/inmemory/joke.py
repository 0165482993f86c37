"""In-memory joke repository for testing."""

import asyncio
import random
from typing import Optional

from punchline.domain.model.joke import Joke
from punchline.domain.repository.joke import JokeRepository
from punchline.domain.value import JokeId


class InMemoryJokeRepository(JokeRepository):
    """In-memory implementation of JokeRepository for testing."""

    def __init__(self) -> None:
        self._jokes: dict[JokeId, Joke] = {}

    async def add_points(self, snapshot: Joke, points: int) -> Joke:
        """Create the joke from the snapshot or add points to the stored one."""
        await asyncio.sleep(0)
        existing = self._jokes.get(snapshot.id)
        if existing is None:
            joke = snapshot.model_copy(update={"score": points})
        else:
            joke = existing.model_copy(update={"score": existing.score + points})
        self._jokes[joke.id] = joke
        return joke

    async def find_by_id(self, joke_id: JokeId) -> Optional[Joke]:
        """Find a joke by ID."""
        return self._jokes.get(joke_id)

    async def find_random(self) -> Optional[Joke]:
        """Pick one joke at random."""
        if not self._jokes:
            return None
        return random.choice(list(self._jokes.values()))

    async def find_best(self) -> Optional[Joke]:
        """Find the highest scoring joke."""
        if not self._jokes:
            return None
        return max(self._jokes.values(), key=lambda joke: joke.score)

    async def save(self, joke: Joke) -> Joke:
        """Store a joke as-is (test setup helper)."""
        self._jokes[joke.id] = joke
        return joke
