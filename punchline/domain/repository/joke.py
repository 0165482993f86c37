"""Joke repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from punchline.domain.model.joke import Joke
from punchline.domain.value import JokeId


class JokeRepository(ABC):
    """Repository for the Joke aggregate.

    Defines the contract for joke persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_points(self, snapshot: Joke, points: int) -> Joke:
        """Atomically add points to a joke, creating it if absent.

        When the joke does not exist it is created from ``snapshot`` with
        ``score = points``. When it exists only the score changes; the stored
        author and content are kept (first write wins).

        Args:
            snapshot: Joke fields captured from the triggering event
            points: Signed points to add

        Returns:
            The joke as stored after the increment
        """
        pass

    @abstractmethod
    async def find_by_id(self, joke_id: JokeId) -> Optional[Joke]:
        """Find a joke by ID.

        Args:
            joke_id: The joke's unique identifier

        Returns:
            The joke if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_random(self) -> Optional[Joke]:
        """Pick one joke at random.

        Returns:
            A joke, or None if no joke has been scored yet
        """
        pass

    @abstractmethod
    async def find_best(self) -> Optional[Joke]:
        """Find the joke with the highest score.

        Returns:
            The top joke, or None if no joke has been scored yet
        """
        pass
