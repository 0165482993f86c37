"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from punchline.domain.model import Vote
from punchline.domain.repository import VoteRepository
from punchline.domain.value import JokeId, UserId
from punchline.persistence.database import store_errors
from punchline.persistence.mappers import row_to_vote
from punchline.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def try_record(self, joke_id: JokeId, voter_id: UserId) -> bool:
        """Insert the vote; a primary key conflict means the pair already voted.

        ON CONFLICT DO NOTHING makes check-and-insert a single statement, so
        concurrent inserts for the same pair cannot both succeed. The insert
        is committed immediately: the ledger entry must be durable before any
        aggregate moves.
        """
        stmt = (
            insert(votes_table)
            .values(joke_id=joke_id, voter_id=voter_id)
            .on_conflict_do_nothing(index_elements=["joke_id", "voter_id"])
            .returning(votes_table.c.joke_id)
        )
        async with store_errors("votes.try_record"):
            result = await self.session.execute(stmt)
            created = result.first() is not None
            await self.session.commit()
        return created

    async def find(self, joke_id: JokeId, voter_id: UserId) -> Optional[Vote]:
        """Find a user's vote on a joke."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.joke_id == joke_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        async with store_errors("votes.find"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_vote(row) if row else None

    async def count_by_joke(self, joke_id: JokeId) -> int:
        """Count votes on a joke."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.joke_id == joke_id)
        )
        async with store_errors("votes.count_by_joke"):
            result = await self.session.execute(stmt)
            return result.scalar_one()
