"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from punchline.domain.model.user import User
from punchline.domain.value import JokeId, Rank, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top(self, limit: int) -> list[User]:
        """Find the highest scoring users.

        Args:
            limit: Maximum number of users to return

        Returns:
            Users ordered by score, descending
        """
        pass

    @abstractmethod
    async def add_points(
        self,
        user_id: UserId,
        display_name: str,
        joke_id: JokeId,
        points: int,
        initial_rank: Rank,
    ) -> User:
        """Atomically add points to a user, creating them if absent.

        A new user is created with ``score = points``, ``joke_ids = {joke_id}``
        and ``rank = initial_rank``. An existing user gets ``points`` added and
        ``joke_id`` unioned into ``joke_ids``; display name and rank are left
        untouched.

        Args:
            user_id: The credited user's ID
            display_name: Display name used only when the user is created
            joke_id: The joke the points were earned on
            points: Signed points to add
            initial_rank: Rank stored when the user is created

        Returns:
            The user after the increment. ``rank`` is still the rank stored
            before this call, so callers can detect a transition.
        """
        pass

    @abstractmethod
    async def set_rank(self, user_id: UserId, rank: Rank, expected_score: int) -> bool:
        """Store a recomputed rank if the score has not moved since.

        Compare-and-set on score: the write only happens while the stored
        score still equals ``expected_score``. A newer increment means a newer
        event owns the rank decision.

        Args:
            user_id: The user's unique identifier
            rank: Rank computed from ``expected_score``
            expected_score: Score the rank was computed from

        Returns:
            True if the rank was written, False if the score had moved on
        """
        pass
