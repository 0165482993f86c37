"""User domain service."""

import logfire

from punchline.domain.error import NotFoundError
from punchline.domain.model import User
from punchline.domain.repository import UserRepository
from punchline.domain.value import JokeId, Rank, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            logfire.info("User found", user_id=user_id, score=user.score)
            return user

    async def get_leaderboard(self, limit: int) -> list[User]:
        """Get the top users by score.

        Args:
            limit: Number of users to return

        Returns:
            Users ordered by score, descending
        """
        with logfire.span("user_service.get_leaderboard", limit=limit):
            users = await self.user_repository.find_top(limit)
            logfire.info("Leaderboard fetched", count=len(users))
            return users

    async def add_points(
        self,
        user_id: UserId,
        display_name: str,
        joke_id: JokeId,
        points: int,
        initial_rank: Rank,
    ) -> User:
        """Atomically credit points to a joke's author.

        Called for every accepted vote. Uses an atomic store upsert so
        concurrent votes for the same author never lose an increment.

        Args:
            user_id: Author's user ID
            display_name: Author's display name, used only on creation
            joke_id: The joke the points were earned on
            points: Signed points to add
            initial_rank: Rank stored if the user is created by this call

        Returns:
            The user after the increment, carrying the rank stored before it
        """
        with logfire.span(
            "user_service.add_points", user_id=user_id, joke_id=joke_id, points=points
        ):
            user = await self.user_repository.add_points(
                user_id, display_name, joke_id, points, initial_rank
            )
            logfire.info("User points added", user_id=user_id, score=user.score)
            return user

    async def update_rank(self, user_id: UserId, rank: Rank, expected_score: int) -> bool:
        """Persist a recomputed rank unless the score has changed since.

        Args:
            user_id: User ID
            rank: New rank
            expected_score: Score the rank was computed from

        Returns:
            True if stored, False if a newer score superseded it
        """
        with logfire.span(
            "user_service.update_rank", user_id=user_id, rank=rank.value
        ):
            stored = await self.user_repository.set_rank(user_id, rank, expected_score)
            if stored:
                logfire.info("Rank updated", user_id=user_id, rank=rank.value)
            else:
                logfire.info(
                    "Rank update superseded by a newer score",
                    user_id=user_id,
                    rank=rank.value,
                    expected_score=expected_score,
                )
            return stored
