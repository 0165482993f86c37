"""Domain value objects for Punchline.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

# Bounds on the points a single vote may carry
MIN_POINTS = -100
MAX_POINTS = 100


class Rank(str, Enum):
    """Rank tiers, declared lowest to highest.

    Declaration order is the tier order. Comparisons between ranks go
    through ``tier``, never through the label text.
    """

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    DIAMOND = "Diamond"
    ASCENDANT = "Ascendant"
    GRANDMASTER = "Grandmaster"

    @property
    def tier(self) -> int:
        """Zero-based position of this rank in the tier order."""
        return list(Rank).index(self)


class Comparison(str, Enum):
    """Result of comparing two ranks by tier."""

    LOWER = "lower"
    EQUAL = "equal"
    HIGHER = "higher"


class RankTransition(str, Enum):
    """Direction of a rank change caused by a vote."""

    PROMOTED = "promoted"
    DEMOTED = "demoted"


class VoteStatus(str, Enum):
    """Terminal status of a vote that reached the scoring engine."""

    ACCEPTED = "accepted"
    ALREADY_VOTED = "already_voted"
