"""Get user rank use case."""

from pydantic import BaseModel

from punchline.domain.error import NotFoundError
from punchline.domain.service import UserService
from punchline.domain.value import Rank, UserId


class GetUserRankRequest(BaseModel):
    """Get user rank request."""

    user_id: str


class GetUserRankResponse(BaseModel):
    """Get user rank response."""

    user_id: str
    display_name: str
    score: int
    rank: Rank
    joke_count: int


class GetUserRankUseCase:
    """Use case for looking up one user's score and rank."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user rank use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRankRequest) -> GetUserRankResponse | None:
        """Execute get user rank flow.

        Args:
            request: Request with the user's ID

        Returns:
            Score and rank, or None if the user has no points yet
        """
        try:
            user = await self.user_service.get_by_id(UserId(request.user_id))
        except NotFoundError:
            return None

        return GetUserRankResponse(
            user_id=user.id,
            display_name=user.display_name,
            score=user.score,
            rank=user.rank,
            joke_count=len(user.joke_ids),
        )
