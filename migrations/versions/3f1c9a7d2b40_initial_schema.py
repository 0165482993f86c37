"""initial_schema

Create the schema for Punchline:
- Votes (ledger; one row per voter per joke)
- Jokes (score plus a first-vote snapshot of author and content)
- Users (score, stored rank and the jokes they were ranked on)

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # VOTES TABLE
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("joke_id", sa.String(64), nullable=False),
        sa.Column("voter_id", sa.String(64), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("joke_id", "voter_id"),
    )

    # ========================================================================
    # JOKES TABLE
    # ========================================================================
    op.create_table(
        "jokes",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("author_id", sa.String(64), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_jokes_score", "jokes", [sa.text("score DESC")])
    op.create_index("idx_jokes_author_id", "jokes", ["author_id"])

    # ========================================================================
    # USERS TABLE
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column(
            "joke_ids",
            postgresql.ARRAY(sa.String(64)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rank", sa.String(32), nullable=False, server_default="Bronze"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_score", "users", [sa.text("score DESC")])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_score", table_name="users")
    op.drop_table("users")
    op.drop_index("idx_jokes_author_id", table_name="jokes")
    op.drop_index("idx_jokes_score", table_name="jokes")
    op.drop_table("jokes")
    op.drop_table("votes")
