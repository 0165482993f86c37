"""Vote records, the normalized vote event and its outcome."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from punchline.domain.model.common import DomainModel
from punchline.domain.value import (
    MAX_POINTS,
    MIN_POINTS,
    JokeId,
    Rank,
    RankTransition,
    UserId,
    VoteStatus,
)


class Vote(DomainModel):
    """Vote ledger entry.

    One record per (joke_id, voter_id) pair, enforced by the store's unique
    constraint. Never updated, never deleted.
    """

    joke_id: JokeId
    voter_id: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class VoteEvent(DomainModel):
    """Normalized vote event consumed by the scoring engine.

    Both the reply command and emoji reactions reduce to this shape. Event
    sources have already excluded self votes and zero-weight reactions; the
    points bounds are re-checked here so an invalid event cannot be built.
    """

    joke_id: JokeId
    author_id: UserId
    author_name: str
    content: str
    voter_id: UserId
    points: int = Field(ge=MIN_POINTS, le=MAX_POINTS)

    @field_validator("points")
    @classmethod
    def validate_points_non_zero(cls, v: int) -> int:
        """Zero points is a no-op signal, never a vote."""
        if v == 0:
            raise ValueError("Points must be non-zero")
        return v


class VoteOutcome(DomainModel):
    """Result of applying a vote event.

    Scores and rank are only set for accepted votes.
    """

    status: VoteStatus
    joke_id: JokeId
    user_id: UserId
    joke_score: int | None = None
    user_score: int | None = None
    user_rank: Rank | None = None
    transition: RankTransition | None = None

    @property
    def accepted(self) -> bool:
        """Whether the vote was applied."""
        return self.status == VoteStatus.ACCEPTED
