"""React to joke use case."""

from pydantic import BaseModel

from punchline.domain.service import ScoringService, VotePolicy
from punchline.domain.value import JokeId, UserId

from .cast_vote import CastVoteResponse


class ReactToJokeRequest(BaseModel):
    """React to joke request."""

    joke_id: str
    author_id: str
    author_name: str
    author_is_bot: bool = False
    content: str
    voter_id: str
    emoji: str  # Unicode emoji or custom emoji name


class ReactToJokeUseCase:
    """Use case for voting on a joke with an emoji reaction."""

    def __init__(self, vote_policy: VotePolicy, scoring_service: ScoringService) -> None:
        """Initialize react to joke use case.

        Args:
            vote_policy: Vote source boundary checks
            scoring_service: Scoring domain service
        """
        self.vote_policy = vote_policy
        self.scoring_service = scoring_service

    async def execute(self, request: ReactToJokeRequest) -> CastVoteResponse | None:
        """Execute react to joke flow.

        Args:
            request: React to joke request

        Returns:
            Vote outcome, or None if the emoji is not worth any points

        Raises:
            SelfVoteError: If the voter wrote the joke
            NotAllowedError: If the joke was posted by a bot
            StoreUnavailableError: If the store cannot be reached
        """
        event = self.vote_policy.reaction_event(
            joke_id=JokeId(request.joke_id),
            author_id=UserId(request.author_id),
            author_name=request.author_name,
            content=request.content,
            voter_id=UserId(request.voter_id),
            emoji=request.emoji,
            author_is_bot=request.author_is_bot,
        )
        if event is None:
            return None

        outcome = await self.scoring_service.apply_vote(event)
        return CastVoteResponse.from_outcome(outcome, event.points)
