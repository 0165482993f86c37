"""Get random joke use case."""

from pydantic import BaseModel

from punchline.domain.model import Joke
from punchline.domain.service import JokeService


class JokeResponse(BaseModel):
    """Joke details."""

    joke_id: str
    author_id: str
    author_name: str
    content: str
    score: int

    @classmethod
    def from_joke(cls, joke: Joke) -> "JokeResponse":
        """Build the response from a Joke aggregate."""
        return cls(
            joke_id=joke.id,
            author_id=joke.author_id,
            author_name=joke.author_name,
            content=joke.content,
            score=joke.score,
        )


class GetRandomJokeUseCase:
    """Use case for fetching a random stored joke."""

    def __init__(self, joke_service: JokeService) -> None:
        """Initialize get random joke use case.

        Args:
            joke_service: Joke domain service
        """
        self.joke_service = joke_service

    async def execute(self) -> JokeResponse | None:
        """Return a random joke, or None if none are stored."""
        joke = await self.joke_service.get_random()
        return JokeResponse.from_joke(joke) if joke else None
