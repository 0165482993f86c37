"""Test configuration and fixtures."""


import logfire

from punchline.domain.model import Joke, User, VoteEvent
from punchline.domain.value import JokeId, Rank, UserId

# Keep spans local; nothing is exported from test runs
logfire.configure(send_to_logfire=False, console=False)


def make_event(
    points: int,
    joke_id: str = "joke-1",
    voter_id: str = "voter-1",
    author_id: str = "author-1",
    author_name: str = "alice",
    content: str = "Why did the chicken cross the road?",
) -> VoteEvent:
    """Helper to build a vote event with sensible defaults."""
    return VoteEvent(
        joke_id=JokeId(joke_id),
        author_id=UserId(author_id),
        author_name=author_name,
        content=content,
        voter_id=UserId(voter_id),
        points=points,
    )


def make_user(
    score: int,
    rank: Rank,
    user_id: str = "author-1",
    display_name: str = "alice",
    joke_ids: tuple[str, ...] = (),
) -> User:
    """Helper to build a stored user."""
    return User(
        id=UserId(user_id),
        display_name=display_name,
        joke_ids=frozenset(JokeId(joke_id) for joke_id in joke_ids),
        score=score,
        rank=rank,
    )


def make_joke(
    score: int = 0,
    joke_id: str = "joke-1",
    author_id: str = "author-1",
    author_name: str = "alice",
    content: str = "Why did the chicken cross the road?",
) -> Joke:
    """Helper to build a stored joke."""
    return Joke(
        id=JokeId(joke_id),
        author_id=UserId(author_id),
        author_name=author_name,
        content=content,
        score=score,
    )


