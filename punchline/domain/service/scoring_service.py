"""Scoring domain service.

Applies vote events exactly once: the vote ledger decides whether a vote
counts, then the joke and user aggregates are incremented at the store and
the author's rank is recomputed.

Consistency model:
- The ledger insert is the only serialization point per (joke, voter) pair.
- Increments are atomic at the store; nothing is read, modified and written
  back in Python.
- The three stores are not wrapped in one transaction. If a later step
  fails, the vote stays recorded and the aggregates may be partially
  updated.
- Two concurrent votes for the same author can both see the same stored
  rank and both report the transition. The duplicate notice is harmless;
  the stored rank still converges because rank writes are compare-and-set
  on the score they were computed from.
"""

import logfire

from punchline.domain.error import InconsistentAggregateError
from punchline.domain.model import Joke, VoteEvent, VoteOutcome
from punchline.domain.repository import VoteRepository
from punchline.domain.value import Comparison, RankTransition, VoteStatus

from .base import Service
from .joke_service import JokeService
from .rank_policy import RankPolicy
from .user_service import UserService


class ScoringService(Service):
    """Domain service that turns vote events into score changes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        joke_service: JokeService,
        user_service: UserService,
        rank_policy: RankPolicy,
    ) -> None:
        """Initialize scoring service.

        Args:
            vote_repository: Vote ledger
            joke_service: Joke domain service
            user_service: User domain service
            rank_policy: Score to rank mapping
        """
        self.vote_repository = vote_repository
        self.joke_service = joke_service
        self.user_service = user_service
        self.rank_policy = rank_policy

    async def apply_vote(self, event: VoteEvent) -> VoteOutcome:
        """Apply a vote event.

        The event must already have passed the vote policy (no self votes,
        no zero points).

        Args:
            event: Normalized vote event

        Returns:
            ACCEPTED outcome with the new scores, rank and any transition,
            or ALREADY_VOTED if the voter had already voted on this joke

        Raises:
            StoreUnavailableError: If a store call fails
            InconsistentAggregateError: If an upsert returns a state that
                contradicts the event
        """
        with logfire.span(
            "scoring_service.apply_vote",
            joke_id=event.joke_id,
            voter_id=event.voter_id,
            author_id=event.author_id,
            points=event.points,
        ):
            recorded = await self.vote_repository.try_record(
                event.joke_id, event.voter_id
            )
            if not recorded:
                logfire.info(
                    "Duplicate vote ignored",
                    joke_id=event.joke_id,
                    voter_id=event.voter_id,
                )
                return VoteOutcome(
                    status=VoteStatus.ALREADY_VOTED,
                    joke_id=event.joke_id,
                    user_id=event.author_id,
                )

            joke = await self.joke_service.add_points(
                Joke(
                    id=event.joke_id,
                    author_id=event.author_id,
                    author_name=event.author_name,
                    content=event.content,
                ),
                event.points,
            )
            if joke.author_id != event.author_id:
                logfire.error(
                    "Joke author changed between votes",
                    joke_id=joke.id,
                    stored_author_id=joke.author_id,
                    event_author_id=event.author_id,
                )
                raise InconsistentAggregateError(
                    "Joke", joke.id, f"stored author {joke.author_id} != {event.author_id}"
                )

            user = await self.user_service.add_points(
                event.author_id,
                event.author_name,
                event.joke_id,
                event.points,
                initial_rank=self.rank_policy.rank_for(event.points),
            )
            if event.joke_id not in user.joke_ids:
                logfire.error(
                    "User aggregate is missing the voted joke",
                    user_id=user.id,
                    joke_id=event.joke_id,
                )
                raise InconsistentAggregateError(
                    "User", user.id, f"joke {event.joke_id} missing from joke_ids"
                )

            previous_rank = user.rank
            new_rank = self.rank_policy.rank_for(user.score)
            transition = None

            if new_rank != previous_rank:
                stored = await self.user_service.update_rank(
                    user.id, new_rank, expected_score=user.score
                )
                if stored:
                    transition = (
                        RankTransition.PROMOTED
                        if self.rank_policy.compare(new_rank, previous_rank)
                        == Comparison.HIGHER
                        else RankTransition.DEMOTED
                    )
                    logfire.info(
                        "Rank changed",
                        user_id=user.id,
                        previous_rank=previous_rank.value,
                        rank=new_rank.value,
                        transition=transition.value,
                    )

            logfire.info(
                "Vote applied",
                joke_id=joke.id,
                joke_score=joke.score,
                user_id=user.id,
                user_score=user.score,
            )
            return VoteOutcome(
                status=VoteStatus.ACCEPTED,
                joke_id=joke.id,
                user_id=user.id,
                joke_score=joke.score,
                user_score=user.score,
                user_rank=new_rank,
                transition=transition,
            )
