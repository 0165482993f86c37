"""Rank policy: maps cumulative scores to rank tiers."""

from punchline.config import RankingSettings
from punchline.domain.value import Comparison, Rank

from .base import Service


class RankPolicy(Service):
    """Pure mapping from score to rank, plus the tier order.

    Thresholds come from configuration, loaded once and never mutated.
    """

    def __init__(self, ranking_settings: RankingSettings) -> None:
        """Initialize rank policy.

        Args:
            ranking_settings: Validated tier thresholds
        """
        # Highest tier first so the first match wins
        self._bounds: tuple[tuple[int, Rank], ...] = tuple(
            sorted(
                ((bound, rank) for rank, bound in ranking_settings.thresholds.items()),
                reverse=True,
            )
        )

    def rank_for(self, score: int) -> Rank:
        """Return the highest rank whose threshold is at or below score.

        Args:
            score: Cumulative score, may be negative

        Returns:
            Rank for the score; Bronze below every threshold
        """
        for bound, rank in self._bounds:
            if score >= bound:
                return rank
        return Rank.BRONZE

    @staticmethod
    def compare(a: Rank, b: Rank) -> Comparison:
        """Compare two ranks by tier order.

        Args:
            a: Rank being classified
            b: Rank it is compared against

        Returns:
            HIGHER if ``a`` is a higher tier than ``b``, LOWER if lower,
            EQUAL if they are the same tier
        """
        if a.tier > b.tier:
            return Comparison.HIGHER
        if a.tier < b.tier:
            return Comparison.LOWER
        return Comparison.EQUAL
