"""Vote policy: turns command and reaction input into vote events."""

import logfire

from punchline.config import ScoringSettings
from punchline.domain.error import InvalidPointsError, NotAllowedError, SelfVoteError
from punchline.domain.model.vote import VoteEvent
from punchline.domain.value import JokeId, UserId

from .base import Service


class VotePolicy(Service):
    """Boundary checks shared by every vote source.

    The scoring engine trusts its input, so everything that can reject a
    vote before it is recorded lives here:
    - bot-authored messages cannot be ranked
    - authors cannot rank their own jokes, unless configured otherwise
    - command points must be non-zero and within the points limit
    - reactions outside the reaction table, or weighted zero, are ignored

    The same self-vote rule applies to commands and reactions.
    """

    def __init__(self, scoring_settings: ScoringSettings) -> None:
        """Initialize vote policy.

        Args:
            scoring_settings: Reaction table and vote limits
        """
        self.scoring_settings = scoring_settings

    @property
    def points_limit(self) -> int:
        """Largest absolute points value a vote may carry."""
        return self.scoring_settings.points_limit

    def reaction_points(self, emoji: str) -> int | None:
        """Look up the points an emoji is worth.

        Args:
            emoji: Unicode emoji or custom emoji name

        Returns:
            Points clamped to the points limit, or None when the emoji is
            not in the reaction table or is weighted zero
        """
        points = self.scoring_settings.reactions.get(emoji)
        if not points:
            return None
        return max(-self.points_limit, min(self.points_limit, points))

    def command_event(
        self,
        joke_id: JokeId,
        author_id: UserId,
        author_name: str,
        content: str,
        voter_id: UserId,
        points: int,
        author_is_bot: bool = False,
    ) -> VoteEvent:
        """Build the vote event for an explicit ranking command.

        Raises:
            NotAllowedError: If the joke was posted by a bot
            SelfVoteError: If the voter is the author and self votes are off
            InvalidPointsError: If points are zero or beyond the limit
        """
        self._check_voter(joke_id, author_id, voter_id, author_is_bot)

        if points == 0 or abs(points) > self.points_limit:
            logfire.info(
                "Vote rejected: invalid points",
                joke_id=joke_id,
                voter_id=voter_id,
                points=points,
            )
            raise InvalidPointsError(points, -self.points_limit, self.points_limit)

        return VoteEvent(
            joke_id=joke_id,
            author_id=author_id,
            author_name=author_name,
            content=content,
            voter_id=voter_id,
            points=points,
        )

    def reaction_event(
        self,
        joke_id: JokeId,
        author_id: UserId,
        author_name: str,
        content: str,
        voter_id: UserId,
        emoji: str,
        author_is_bot: bool = False,
    ) -> VoteEvent | None:
        """Build the vote event for an emoji reaction.

        Returns:
            The event, or None if the emoji carries no points

        Raises:
            NotAllowedError: If the joke was posted by a bot
            SelfVoteError: If the voter is the author and self votes are off
        """
        points = self.reaction_points(emoji)
        if points is None:
            return None

        self._check_voter(joke_id, author_id, voter_id, author_is_bot)

        return VoteEvent(
            joke_id=joke_id,
            author_id=author_id,
            author_name=author_name,
            content=content,
            voter_id=voter_id,
            points=points,
        )

    def _check_voter(
        self,
        joke_id: JokeId,
        author_id: UserId,
        voter_id: UserId,
        author_is_bot: bool,
    ) -> None:
        if author_is_bot:
            logfire.info("Vote rejected: bot author", joke_id=joke_id)
            raise NotAllowedError(f"Joke {joke_id} was posted by a bot")

        if author_id == voter_id and not self.scoring_settings.allow_self_votes:
            logfire.info("Vote rejected: self vote", joke_id=joke_id, voter_id=voter_id)
            raise SelfVoteError(voter_id, joke_id)
