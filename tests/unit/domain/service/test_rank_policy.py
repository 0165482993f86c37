"""Unit tests for RankPolicy."""

import pytest

from punchline.config import RankingSettings
from punchline.domain.service import RankPolicy
from punchline.domain.value import Comparison, Rank


@pytest.fixture
def rank_policy() -> RankPolicy:
    return RankPolicy(RankingSettings())


class TestRankFor:
    """Tests for rank_for with the default thresholds."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (-250, Rank.BRONZE),
            (0, Rank.BRONZE),
            (500, Rank.BRONZE),
            (501, Rank.SILVER),
            (1000, Rank.SILVER),
            (1001, Rank.GOLD),
            (1501, Rank.PLATINUM),
            (2001, Rank.DIAMOND),
            (2501, Rank.ASCENDANT),
            (3000, Rank.ASCENDANT),
            (3001, Rank.GRANDMASTER),
            (1_000_000, Rank.GRANDMASTER),
        ],
    )
    def test_thresholds(self, rank_policy, score, expected):
        """Each threshold is the inclusive lower bound of its tier."""
        assert rank_policy.rank_for(score) == expected

    def test_monotonic(self, rank_policy):
        """Higher scores never map to lower tiers."""
        tiers = [rank_policy.rank_for(score).tier for score in range(-100, 3200, 7)]
        assert tiers == sorted(tiers)

    def test_custom_thresholds(self):
        """Thresholds come from settings."""
        settings = RankingSettings(
            thresholds={
                Rank.SILVER: 10,
                Rank.GOLD: 20,
                Rank.PLATINUM: 30,
                Rank.DIAMOND: 40,
                Rank.ASCENDANT: 50,
                Rank.GRANDMASTER: 60,
            }
        )
        rank_policy = RankPolicy(settings)

        assert rank_policy.rank_for(9) == Rank.BRONZE
        assert rank_policy.rank_for(10) == Rank.SILVER
        assert rank_policy.rank_for(65) == Rank.GRANDMASTER


class TestCompare:
    """Tests for compare."""

    def test_higher(self):
        assert RankPolicy.compare(Rank.SILVER, Rank.BRONZE) == Comparison.HIGHER

    def test_lower(self):
        assert RankPolicy.compare(Rank.GOLD, Rank.GRANDMASTER) == Comparison.LOWER

    def test_equal(self):
        assert RankPolicy.compare(Rank.DIAMOND, Rank.DIAMOND) == Comparison.EQUAL
