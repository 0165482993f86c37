"""In-memory user repository for testing."""

import asyncio
from typing import Optional

from punchline.domain.model.user import User
from punchline.domain.repository.user import UserRepository
from punchline.domain.value import JokeId, Rank, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_top(self, limit: int) -> list[User]:
        """Find the highest scoring users."""
        users = sorted(self._users.values(), key=lambda user: user.score, reverse=True)
        return users[:limit]

    async def add_points(
        self,
        user_id: UserId,
        display_name: str,
        joke_id: JokeId,
        points: int,
        initial_rank: Rank,
    ) -> User:
        """Create the user or add points and the joke to the stored one."""
        await asyncio.sleep(0)
        existing = self._users.get(user_id)
        if existing is None:
            user = User(
                id=user_id,
                display_name=display_name,
                joke_ids=frozenset({joke_id}),
                score=points,
                rank=initial_rank,
            )
        else:
            user = existing.model_copy(
                update={
                    "score": existing.score + points,
                    "joke_ids": existing.joke_ids | {joke_id},
                }
            )
        self._users[user_id] = user
        return user

    async def set_rank(self, user_id: UserId, rank: Rank, expected_score: int) -> bool:
        """Store the rank if the score is still the expected one."""
        await asyncio.sleep(0)
        user = self._users.get(user_id)
        if user is None or user.score != expected_score:
            return False
        self._users[user_id] = user.model_copy(update={"rank": rank})
        return True

    async def save(self, user: User) -> User:
        """Store a user as-is (test setup helper)."""
        self._users[user.id] = user
        return user
