"""Get best joke use case."""

from punchline.domain.service import JokeService

from .get_random_joke import JokeResponse


class GetBestJokeUseCase:
    """Use case for fetching the highest scoring joke."""

    def __init__(self, joke_service: JokeService) -> None:
        self.joke_service = joke_service

    async def execute(self) -> JokeResponse | None:
        """Return the best joke, or None if nothing has been ranked."""
        joke = await self.joke_service.get_best()
        return JokeResponse.from_joke(joke) if joke else None
