"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import and_, case, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from punchline.domain.model import User
from punchline.domain.repository import UserRepository
from punchline.domain.value import JokeId, Rank, UserId
from punchline.persistence.database import store_errors
from punchline.persistence.mappers import row_to_user
from punchline.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        async with store_errors("users.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_top(self, limit: int) -> list[User]:
        """Find the highest scoring users."""
        stmt = select(users_table).order_by(users_table.c.score.desc()).limit(limit)
        async with store_errors("users.find_top"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_user(row) for row in rows]

    async def add_points(
        self,
        user_id: UserId,
        display_name: str,
        joke_id: JokeId,
        points: int,
        initial_rank: Rank,
    ) -> User:
        """Upsert with increment and set union on joke_ids.

        ``rank`` is not in the update set, so the returned row carries the
        rank stored before this increment.
        """
        insert_stmt = insert(users_table).values(
            id=user_id,
            display_name=display_name,
            joke_ids=[joke_id],
            score=points,
            rank=initial_rank.value,
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                "score": users_table.c.score + insert_stmt.excluded.score,
                "joke_ids": case(
                    (
                        users_table.c.joke_ids.contains(insert_stmt.excluded.joke_ids),
                        users_table.c.joke_ids,
                    ),
                    else_=func.array_cat(
                        users_table.c.joke_ids,
                        insert_stmt.excluded.joke_ids,
                        type_=users_table.c.joke_ids.type,
                    ),
                ),
            },
        ).returning(*users_table.c)

        async with store_errors("users.add_points"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.commit()
        return row_to_user(row)

    async def set_rank(self, user_id: UserId, rank: Rank, expected_score: int) -> bool:
        """Compare-and-set the rank on the score it was computed from."""
        stmt = (
            update(users_table)
            .where(
                and_(
                    users_table.c.id == user_id,
                    users_table.c.score == expected_score,
                )
            )
            .values(rank=rank.value)
        )
        async with store_errors("users.set_rank"):
            result = await self.session.execute(stmt)
            await self.session.commit()
        return result.rowcount > 0  # type: ignore[attr-defined]
