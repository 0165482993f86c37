"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from punchline.domain.model.vote import Vote
from punchline.domain.value import JokeId, UserId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    The ledger only ever grows: there is no update or delete operation.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def try_record(self, joke_id: JokeId, voter_id: UserId) -> bool:
        """Record a vote unless the pair has voted before.

        Check and insert must be one atomic operation at the store. Of any
        number of concurrent calls for the same pair, exactly one returns True.

        Args:
            joke_id: The joke being voted on
            voter_id: The voting user

        Returns:
            True if this call created the record, False if it already existed
        """
        pass

    @abstractmethod
    async def find(self, joke_id: JokeId, voter_id: UserId) -> Optional[Vote]:
        """Find the vote a user cast on a joke.

        Args:
            joke_id: The joke's ID
            voter_id: The voting user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_joke(self, joke_id: JokeId) -> int:
        """Count votes on a joke.

        Args:
            joke_id: The joke's ID

        Returns:
            Number of votes
        """
        pass
