"""Joke aggregate.

A joke is a chat message that has received at least one accepted vote.
"""

from punchline.domain.model.common import DomainModel
from punchline.domain.value import JokeId, UserId


class Joke(DomainModel):
    """Joke aggregate.

    Business rules:
    - Created by the first accepted vote, with the author and content
      captured from that vote's event
    - author_id, author_name and content are first-write-wins: later votes
      never overwrite them, even if the message was edited
    - score only changes by the signed points of accepted votes
    """

    id: JokeId
    author_id: UserId
    author_name: str
    content: str
    score: int = 0
