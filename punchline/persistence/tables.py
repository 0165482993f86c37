"""SQLAlchemy table definitions for Punchline.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTES TABLE (ledger)
# ============================================================================
# The composite primary key is the one-vote-per-user-per-joke constraint.
# joke_id is a soft reference: a vote may exist before its joke row does.
votes_table = Table(
    "votes",
    metadata,
    Column("joke_id", String(64), primary_key=True),
    Column("voter_id", String(64), primary_key=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# JOKES TABLE
# ============================================================================
jokes_table = Table(
    "jokes",
    metadata,
    Column("id", String(64), primary_key=True),  # Chat message ID
    Column("author_id", String(64), nullable=False),
    Column("author_name", String(255), nullable=False),  # Snapshot, first write wins
    Column("content", Text, nullable=False),  # Snapshot, first write wins
    Column("score", Integer, nullable=False, server_default="0"),
)

Index("idx_jokes_score", jokes_table.c.score.desc())
Index("idx_jokes_author_id", jokes_table.c.author_id)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),  # Chat user ID
    Column("display_name", String(255), nullable=False),
    Column("joke_ids", ARRAY(String(64)), nullable=False, server_default="{}"),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("rank", String(32), nullable=False, server_default="Bronze"),
)

Index("idx_users_score", users_table.c.score.desc())
