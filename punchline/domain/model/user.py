"""User aggregate root.

Users accumulate score through votes on the jokes they authored.
"""

from pydantic import Field

from punchline.domain.model.common import DomainModel
from punchline.domain.value import JokeId, Rank, UserId


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Created by the first vote credited to the user
    - joke_ids only grows (set union)
    - rank is derived from score by the rank policy after every score change
    """

    id: UserId
    display_name: str
    joke_ids: frozenset[JokeId] = Field(default_factory=frozenset)
    score: int = 0
    rank: Rank = Rank.BRONZE
