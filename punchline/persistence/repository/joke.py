"""PostgreSQL implementation of Joke repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from punchline.domain.model import Joke
from punchline.domain.repository import JokeRepository
from punchline.domain.value import JokeId
from punchline.persistence.database import store_errors
from punchline.persistence.mappers import joke_to_dict, row_to_joke
from punchline.persistence.tables import jokes_table


class PostgresJokeRepository(JokeRepository):
    """PostgreSQL implementation of JokeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add_points(self, snapshot: Joke, points: int) -> Joke:
        """Upsert with increment.

        On conflict only ``score`` is touched, which keeps the snapshot
        columns first-write-wins.
        """
        insert_stmt = insert(jokes_table).values(
            **{**joke_to_dict(snapshot), "score": points}
        )
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={"score": jokes_table.c.score + insert_stmt.excluded.score},
        ).returning(*jokes_table.c)

        async with store_errors("jokes.add_points"):
            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.commit()
        return row_to_joke(row)

    async def find_by_id(self, joke_id: JokeId) -> Optional[Joke]:
        """Find a joke by ID."""
        stmt = select(jokes_table).where(jokes_table.c.id == joke_id)
        async with store_errors("jokes.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_joke(row) if row else None

    async def find_random(self) -> Optional[Joke]:
        """Pick one joke at random."""
        stmt = select(jokes_table).order_by(func.random()).limit(1)
        async with store_errors("jokes.find_random"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_joke(row) if row else None

    async def find_best(self) -> Optional[Joke]:
        """Find the highest scoring joke."""
        stmt = select(jokes_table).order_by(jokes_table.c.score.desc()).limit(1)
        async with store_errors("jokes.find_best"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_joke(row) if row else None
