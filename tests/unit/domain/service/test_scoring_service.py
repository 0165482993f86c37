"""Unit tests for ScoringService."""

import asyncio

import pytest

from punchline.domain.error import InconsistentAggregateError
from punchline.domain.repository import JokeRepository, UserRepository, VoteRepository
from punchline.domain.service import RankPolicy, ScoringService
from punchline.domain.value import JokeId, Rank, RankTransition, UserId, VoteStatus
from tests.conftest import make_event, make_joke, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestApplyVote:
    """Tests for the basic vote flow."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_joke_and_user(self, unit_env):
        """First vote on a joke should create both aggregates."""
        # Arrange
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)
        user_repo = await unit_env.get(UserRepository)

        # Act
        outcome = await scoring_service.apply_vote(make_event(40))

        # Assert
        assert outcome.status == VoteStatus.ACCEPTED
        assert outcome.accepted
        assert outcome.joke_score == 40
        assert outcome.user_score == 40
        assert outcome.user_rank == Rank.BRONZE
        assert outcome.transition is None

        joke = await joke_repo.find_by_id(JokeId("joke-1"))
        assert joke.score == 40
        assert joke.author_id == "author-1"

        user = await user_repo.find_by_id(UserId("author-1"))
        assert user.score == 40
        assert user.joke_ids == frozenset({"joke-1"})

    @pytest.mark.asyncio
    async def test_vote_is_recorded_in_ledger(self, unit_env):
        """Accepted vote should leave a ledger entry for the pair."""
        scoring_service = await unit_env.get(ScoringService)
        vote_repo = await unit_env.get(VoteRepository)

        await scoring_service.apply_vote(make_event(10))

        vote = await vote_repo.find(JokeId("joke-1"), UserId("voter-1"))
        assert vote is not None
        assert await vote_repo.count_by_joke(JokeId("joke-1")) == 1

    @pytest.mark.asyncio
    async def test_two_voters_sum_on_joke_and_author(self, unit_env):
        """+40 and -15 from two voters should leave joke and author at 25."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)

        await scoring_service.apply_vote(make_event(40, voter_id="voter-a"))
        outcome = await scoring_service.apply_vote(make_event(-15, voter_id="voter-b"))

        assert outcome.joke_score == 25
        assert outcome.user_score == 25
        user = await user_repo.find_by_id(UserId("author-1"))
        assert user.score == 25

    @pytest.mark.asyncio
    async def test_author_score_spans_jokes(self, unit_env):
        """Author score should be the sum over all of their jokes."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)

        await scoring_service.apply_vote(make_event(30, joke_id="joke-1"))
        await scoring_service.apply_vote(make_event(20, joke_id="joke-2"))

        user = await user_repo.find_by_id(UserId("author-1"))
        assert user.score == 50
        assert user.joke_ids == frozenset({"joke-1", "joke-2"})

    @pytest.mark.asyncio
    async def test_first_snapshot_survives_later_votes(self, unit_env):
        """Later votes should not rewrite the joke's author name or content."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)

        await scoring_service.apply_vote(make_event(10, voter_id="voter-a"))
        await scoring_service.apply_vote(
            make_event(
                10,
                voter_id="voter-b",
                author_name="alice-renamed",
                content="Edited punchline",
            )
        )

        joke = await joke_repo.find_by_id(JokeId("joke-1"))
        assert joke.author_name == "alice"
        assert joke.content == "Why did the chicken cross the road?"
        assert joke.score == 20


class TestDuplicateVotes:
    """Tests for the one-vote-per-pair rule."""

    @pytest.mark.asyncio
    async def test_second_vote_from_same_voter_is_ignored(self, unit_env):
        """Repeat vote should report ALREADY_VOTED and change nothing."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)

        first = await scoring_service.apply_vote(make_event(40))
        second = await scoring_service.apply_vote(make_event(-100))

        assert first.status == VoteStatus.ACCEPTED
        assert second.status == VoteStatus.ALREADY_VOTED
        assert not second.accepted
        assert second.joke_score is None
        assert second.transition is None

        joke = await joke_repo.find_by_id(JokeId("joke-1"))
        assert joke.score == 40

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_same_pair_apply_once(self, unit_env):
        """Same pair twice at once: one accepted, one already voted, one delta."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)
        user_repo = await unit_env.get(UserRepository)

        outcomes = await asyncio.gather(
            scoring_service.apply_vote(make_event(40)),
            scoring_service.apply_vote(make_event(40)),
        )

        statuses = sorted(outcome.status.value for outcome in outcomes)
        assert statuses == ["accepted", "already_voted"]

        joke = await joke_repo.find_by_id(JokeId("joke-1"))
        user = await user_repo.find_by_id(UserId("author-1"))
        assert joke.score == 40
        assert user.score == 40

    @pytest.mark.asyncio
    async def test_many_concurrent_voters_all_counted(self, unit_env):
        """Concurrent votes from distinct voters should never lose an increment."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)

        await asyncio.gather(
            *(
                scoring_service.apply_vote(make_event(5, voter_id=f"voter-{i}"))
                for i in range(20)
            )
        )

        joke = await joke_repo.find_by_id(JokeId("joke-1"))
        assert joke.score == 100


class TestRankTransitions:
    """Tests for promotion and demotion."""

    @pytest.mark.asyncio
    async def test_crossing_threshold_upwards_promotes(self, unit_env):
        """495 + 10 should promote to Silver."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(495, Rank.BRONZE, joke_ids=("old-joke",)))

        outcome = await scoring_service.apply_vote(make_event(10))

        assert outcome.user_score == 505
        assert outcome.user_rank == Rank.SILVER
        assert outcome.transition == RankTransition.PROMOTED

        user = await user_repo.find_by_id(UserId("author-1"))
        assert user.rank == Rank.SILVER

    @pytest.mark.asyncio
    async def test_crossing_threshold_downwards_demotes(self, unit_env):
        """505 - 10 should demote to Bronze."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(505, Rank.SILVER, joke_ids=("old-joke",)))

        outcome = await scoring_service.apply_vote(make_event(-10))

        assert outcome.user_score == 495
        assert outcome.user_rank == Rank.BRONZE
        assert outcome.transition == RankTransition.DEMOTED

        user = await user_repo.find_by_id(UserId("author-1"))
        assert user.rank == Rank.BRONZE

    @pytest.mark.asyncio
    async def test_staying_within_tier_emits_nothing(self, unit_env):
        """A -5 that stays above the threshold should not transition."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(520, Rank.SILVER, joke_ids=("old-joke",)))

        outcome = await scoring_service.apply_vote(make_event(-5))

        assert outcome.user_score == 515
        assert outcome.user_rank == Rank.SILVER
        assert outcome.transition is None

    @pytest.mark.asyncio
    async def test_skipping_tiers_promotes_to_target_rank(self, unit_env):
        """A vote crossing two thresholds should land on the higher tier."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(950, Rank.BRONZE, joke_ids=("old-joke",)))

        outcome = await scoring_service.apply_vote(make_event(60))

        assert outcome.user_rank == Rank.GOLD
        assert outcome.transition == RankTransition.PROMOTED

    @pytest.mark.asyncio
    async def test_concurrent_votes_converge_on_final_rank(self, unit_env):
        """Stored rank should match the final score after concurrent votes."""
        scoring_service = await unit_env.get(ScoringService)
        user_repo = await unit_env.get(UserRepository)
        rank_policy = await unit_env.get(RankPolicy)
        await user_repo.save(make_user(495, Rank.BRONZE, joke_ids=("old-joke",)))

        outcomes = await asyncio.gather(
            scoring_service.apply_vote(make_event(10, joke_id="joke-a", voter_id="v1")),
            scoring_service.apply_vote(make_event(-20, joke_id="joke-b", voter_id="v2")),
            scoring_service.apply_vote(make_event(30, joke_id="joke-c", voter_id="v3")),
        )

        user = await user_repo.find_by_id(UserId("author-1"))
        assert all(outcome.accepted for outcome in outcomes)
        assert user.score == 515
        assert user.rank == rank_policy.rank_for(user.score)


class TestInconsistentAggregates:
    """Tests for upserts that contradict the event."""

    @pytest.mark.asyncio
    async def test_stored_joke_with_other_author_raises(self, unit_env):
        """Joke stored under another author should raise."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)
        await joke_repo.save(make_joke(score=10, author_id="someone-else"))

        with pytest.raises(InconsistentAggregateError, match="Joke joke-1"):
            await scoring_service.apply_vote(make_event(10))

    @pytest.mark.asyncio
    async def test_vote_stays_recorded_after_failure(self, unit_env):
        """The ledger entry is not rolled back when a later step fails."""
        scoring_service = await unit_env.get(ScoringService)
        joke_repo = await unit_env.get(JokeRepository)
        await joke_repo.save(make_joke(score=10, author_id="someone-else"))

        with pytest.raises(InconsistentAggregateError):
            await scoring_service.apply_vote(make_event(10))

        retry = await scoring_service.apply_vote(make_event(10))
        assert retry.status == VoteStatus.ALREADY_VOTED
