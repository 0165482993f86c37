"""In-memory vote repository for testing."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from punchline.domain.model.vote import Vote
from punchline.domain.repository.vote import VoteRepository
from punchline.domain.value import JokeId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Every call yields to the event loop first, like a store round-trip
    would, so concurrent tests get real interleaving. The check and the
    insert then run without a suspension point between them, which is what
    makes try_record atomic.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[JokeId, UserId], Vote] = {}

    async def try_record(self, joke_id: JokeId, voter_id: UserId) -> bool:
        """Record the vote unless the pair already exists."""
        await asyncio.sleep(0)
        key = (joke_id, voter_id)
        if key in self._votes:
            return False
        self._votes[key] = Vote(
            joke_id=joke_id, voter_id=voter_id, created_at=datetime.now(timezone.utc)
        )
        return True

    async def find(self, joke_id: JokeId, voter_id: UserId) -> Optional[Vote]:
        """Find a vote by joke and voter."""
        return self._votes.get((joke_id, voter_id))

    async def count_by_joke(self, joke_id: JokeId) -> int:
        """Count votes for a joke."""
        return sum(1 for key in self._votes if key[0] == joke_id)
