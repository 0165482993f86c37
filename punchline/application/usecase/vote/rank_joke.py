"""Rank joke use case."""

from pydantic import BaseModel

from punchline.domain.service import ScoringService, VotePolicy
from punchline.domain.value import JokeId, UserId

from .cast_vote import CastVoteResponse


class RankJokeRequest(BaseModel):
    """Rank joke request.

    Carries an explicit points value, e.g. from ``!rankjoke 25`` sent as a
    reply to the joke.
    """

    joke_id: str
    author_id: str
    author_name: str
    author_is_bot: bool = False
    content: str
    voter_id: str
    points: int


class RankJokeUseCase:
    """Use case for ranking a joke with an explicit number of points."""

    def __init__(self, vote_policy: VotePolicy, scoring_service: ScoringService) -> None:
        """Initialize rank joke use case.

        Args:
            vote_policy: Vote source boundary checks
            scoring_service: Scoring domain service
        """
        self.vote_policy = vote_policy
        self.scoring_service = scoring_service

    async def execute(self, request: RankJokeRequest) -> CastVoteResponse:
        """Execute rank joke flow.

        Args:
            request: Rank joke request

        Returns:
            Vote outcome; status is ALREADY_VOTED for a repeat vote

        Raises:
            InvalidPointsError: If points are zero or out of range
            SelfVoteError: If the voter wrote the joke
            NotAllowedError: If the joke was posted by a bot
            StoreUnavailableError: If the store cannot be reached
        """
        event = self.vote_policy.command_event(
            joke_id=JokeId(request.joke_id),
            author_id=UserId(request.author_id),
            author_name=request.author_name,
            content=request.content,
            voter_id=UserId(request.voter_id),
            points=request.points,
            author_is_bot=request.author_is_bot,
        )
        outcome = await self.scoring_service.apply_vote(event)
        return CastVoteResponse.from_outcome(outcome, event.points)
