"""Response shared by the vote use cases."""

from pydantic import BaseModel

from punchline.domain.model import VoteOutcome
from punchline.domain.value import Rank, RankTransition, VoteStatus


class CastVoteResponse(BaseModel):
    """Outcome of a vote, as handed to the notification layer."""

    status: VoteStatus
    accepted: bool
    joke_id: str
    user_id: str
    points: int
    joke_score: int | None = None
    user_score: int | None = None
    user_rank: Rank | None = None
    transition: RankTransition | None = None

    @classmethod
    def from_outcome(cls, outcome: VoteOutcome, points: int) -> "CastVoteResponse":
        """Build the response from the scoring engine's outcome."""
        return cls(
            status=outcome.status,
            accepted=outcome.accepted,
            joke_id=outcome.joke_id,
            user_id=outcome.user_id,
            points=points,
            joke_score=outcome.joke_score,
            user_score=outcome.user_score,
            user_rank=outcome.user_rank,
            transition=outcome.transition,
        )
