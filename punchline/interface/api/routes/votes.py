"""Vote routes.

Lets event sources other than the chat gateway submit votes. The caller
identifies the voter; authentication is the job of whatever sits in front
of this API.
"""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Path, status
from pydantic import BaseModel, Field

from punchline.application.usecase.vote import (
    CastVoteResponse,
    RankJokeRequest,
    RankJokeUseCase,
)
from punchline.domain.error import InvalidPointsError, NotAllowedError

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a joke."""

    author_id: str = Field(min_length=1, max_length=64)
    author_name: str = Field(min_length=1, max_length=255)
    author_is_bot: bool = False
    content: str
    voter_id: str = Field(min_length=1, max_length=64)
    points: int


@router.post("/jokes/{joke_id}/votes", response_model=CastVoteResponse)
async def cast_vote(
    joke_id: Annotated[str, Path(min_length=1, max_length=64)],
    request: CastVoteAPIRequest,
    rank_joke_use_case: FromDishka[RankJokeUseCase],
) -> CastVoteResponse:
    """Vote on a joke.

    A repeat vote by the same voter is not an error: the response carries
    ``status="already_voted"`` and nothing changes.

    Args:
        joke_id: Chat message ID of the joke
        request: Joke snapshot, voter and points
        rank_joke_use_case: Rank joke use case from DI

    Returns:
        Vote outcome with the new scores and any rank transition

    Raises:
        HTTPException: 400 for invalid points, 403 for self or bot votes
    """
    try:
        return await rank_joke_use_case.execute(
            RankJokeRequest(
                joke_id=joke_id,
                author_id=request.author_id,
                author_name=request.author_name,
                author_is_bot=request.author_is_bot,
                content=request.content,
                voter_id=request.voter_id,
                points=request.points,
            )
        )
    except InvalidPointsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotAllowedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This joke cannot be ranked by this voter",
        )
