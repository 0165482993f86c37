"""Unit tests for GetUserRankUseCase."""

import pytest

from punchline.application.usecase.user import GetUserRankRequest, GetUserRankUseCase
from punchline.domain.repository import UserRepository
from punchline.domain.value import Rank
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserRankUseCase:
    """Tests for GetUserRankUseCase."""

    @pytest.mark.asyncio
    async def test_known_user(self, unit_env):
        use_case = await unit_env.get(GetUserRankUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(1200, Rank.GOLD, joke_ids=("a", "b", "c")))

        response = await use_case.execute(GetUserRankRequest(user_id="author-1"))

        assert response.score == 1200
        assert response.rank == Rank.GOLD
        assert response.joke_count == 3

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, unit_env):
        use_case = await unit_env.get(GetUserRankUseCase)

        assert await use_case.execute(GetUserRankRequest(user_id="ghost")) is None
