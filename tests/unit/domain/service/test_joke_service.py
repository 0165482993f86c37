"""Unit tests for JokeService."""

import pytest

from punchline.domain.repository import JokeRepository
from punchline.domain.service import JokeService
from tests.conftest import make_joke
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestJokeService:
    """Tests for JokeService."""

    @pytest.mark.asyncio
    async def test_add_points_creates_from_snapshot(self, unit_env):
        joke_service = await unit_env.get(JokeService)

        joke = await joke_service.add_points(make_joke(), 15)

        assert joke.score == 15
        assert joke.content == "Why did the chicken cross the road?"

    @pytest.mark.asyncio
    async def test_add_points_ignores_snapshot_score(self, unit_env):
        """Only the points are added; the snapshot's own score is not."""
        joke_service = await unit_env.get(JokeService)

        joke = await joke_service.add_points(make_joke(score=999), 15)

        assert joke.score == 15

    @pytest.mark.asyncio
    async def test_get_best(self, unit_env):
        joke_service = await unit_env.get(JokeService)
        joke_repo = await unit_env.get(JokeRepository)
        await joke_repo.save(make_joke(score=10, joke_id="a"))
        await joke_repo.save(make_joke(score=90, joke_id="b"))
        await joke_repo.save(make_joke(score=-40, joke_id="c"))

        best = await joke_service.get_best()

        assert best.id == "b"

    @pytest.mark.asyncio
    async def test_get_random_and_best_when_empty(self, unit_env):
        joke_service = await unit_env.get(JokeService)

        assert await joke_service.get_random() is None
        assert await joke_service.get_best() is None

    @pytest.mark.asyncio
    async def test_get_random_returns_stored_joke(self, unit_env):
        joke_service = await unit_env.get(JokeService)
        joke_repo = await unit_env.get(JokeRepository)
        await joke_repo.save(make_joke(joke_id="a"))
        await joke_repo.save(make_joke(joke_id="b"))

        joke = await joke_service.get_random()

        assert joke.id in {"a", "b"}
