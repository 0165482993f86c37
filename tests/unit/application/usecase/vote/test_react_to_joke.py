"""Unit tests for ReactToJokeUseCase."""

import pytest

from punchline.application.usecase.vote import ReactToJokeRequest, ReactToJokeUseCase
from punchline.domain.error import SelfVoteError
from punchline.domain.repository import JokeRepository
from punchline.domain.value import JokeId, VoteStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_request(emoji: str, voter_id: str = "voter-1") -> ReactToJokeRequest:
    return ReactToJokeRequest(
        joke_id="joke-1",
        author_id="author-1",
        author_name="alice",
        content="Parallel lines have so much in common. Shame they'll never meet.",
        voter_id=voter_id,
        emoji=emoji,
    )


class TestReactToJokeUseCase:
    """Tests for ReactToJokeUseCase."""

    @pytest.mark.asyncio
    async def test_mapped_emoji_applies_weight(self, unit_env):
        use_case = await unit_env.get(ReactToJokeUseCase)

        response = await use_case.execute(make_request("😂"))

        assert response.accepted
        assert response.points == 40
        assert response.joke_score == 40

    @pytest.mark.asyncio
    async def test_negative_emoji(self, unit_env):
        use_case = await unit_env.get(ReactToJokeUseCase)

        response = await use_case.execute(make_request("kodak"))

        assert response.points == -20
        assert response.user_score == -20

    @pytest.mark.asyncio
    async def test_unmapped_emoji_is_noop(self, unit_env):
        use_case = await unit_env.get(ReactToJokeUseCase)
        joke_repo = await unit_env.get(JokeRepository)

        response = await use_case.execute(make_request("👍"))

        assert response is None
        assert await joke_repo.find_by_id(JokeId("joke-1")) is None

    @pytest.mark.asyncio
    async def test_second_reaction_from_same_voter_ignored(self, unit_env):
        """Only the first reaction per voter counts, whatever the emoji."""
        use_case = await unit_env.get(ReactToJokeUseCase)

        await use_case.execute(make_request("😂"))
        response = await use_case.execute(make_request("1_Hentai"))

        assert response.status == VoteStatus.ALREADY_VOTED

    @pytest.mark.asyncio
    async def test_reactions_from_two_voters_sum(self, unit_env):
        use_case = await unit_env.get(ReactToJokeUseCase)

        await use_case.execute(make_request("😂", voter_id="voter-a"))
        response = await use_case.execute(make_request("😒", voter_id="voter-b"))

        assert response.joke_score == 25
        assert response.user_score == 25

    @pytest.mark.asyncio
    async def test_self_reaction_rejected(self, unit_env):
        use_case = await unit_env.get(ReactToJokeUseCase)

        with pytest.raises(SelfVoteError):
            await use_case.execute(make_request("😂", voter_id="author-1"))
