"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Mapping

from punchline.domain.model import Joke, User, Vote
from punchline.domain.value import JokeId, Rank, UserId


def row_to_vote(row: Mapping[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        joke_id=JokeId(row["joke_id"]),
        voter_id=UserId(row["voter_id"]),
        created_at=row["created_at"],
    )


def row_to_joke(row: Mapping[str, Any]) -> Joke:
    """Convert database row to Joke domain model."""
    return Joke(
        id=JokeId(row["id"]),
        author_id=UserId(row["author_id"]),
        author_name=row["author_name"],
        content=row["content"],
        score=row["score"],
    )


def joke_to_dict(joke: Joke) -> dict[str, Any]:
    """Convert Joke domain model to database dict."""
    return {
        "id": joke.id,
        "author_id": joke.author_id,
        "author_name": joke.author_name,
        "content": joke.content,
        "score": joke.score,
    }


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as mapping

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        display_name=row["display_name"],
        joke_ids=frozenset(JokeId(joke_id) for joke_id in row["joke_ids"] or ()),
        score=row["score"],
        rank=Rank(row["rank"]),
    )
