"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from punchline.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardResponse,
    GetLeaderboardUseCase,
    GetUserRankRequest,
    GetUserRankResponse,
    GetUserRankUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/leaderboard", response_model=GetLeaderboardResponse)
async def get_leaderboard(
    get_leaderboard_use_case: FromDishka[GetLeaderboardUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
) -> GetLeaderboardResponse:
    """Get the top users by score.

    Args:
        get_leaderboard_use_case: Get leaderboard use case from DI
        limit: Number of users; the configured leaderboard size when omitted

    Returns:
        Leaderboard entries, highest score first
    """
    return await get_leaderboard_use_case.execute(GetLeaderboardRequest(limit=limit))


@router.get("/{user_id}", response_model=GetUserRankResponse)
async def get_user_rank(
    user_id: str,
    get_user_rank_use_case: FromDishka[GetUserRankUseCase],
) -> GetUserRankResponse:
    """Get a user's score and rank.

    Example:
        GET /users/123456789012345678

        Response:
        {
            "user_id": "123456789012345678",
            "display_name": "alice",
            "score": 540,
            "rank": "Silver",
            "joke_count": 7
        }

    Raises:
        HTTPException: If the user has no points yet
    """
    user_rank = await get_user_rank_use_case.execute(GetUserRankRequest(user_id=user_id))

    if not user_rank:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' has no points yet",
        )

    return user_rank
