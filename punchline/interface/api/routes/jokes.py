"""Joke routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from punchline.application.usecase.joke import (
    GetBestJokeUseCase,
    GetRandomJokeUseCase,
    JokeResponse,
)

router = APIRouter(prefix="/jokes", tags=["jokes"], route_class=DishkaRoute)


@router.get("/random", response_model=JokeResponse)
async def get_random_joke(
    get_random_joke_use_case: FromDishka[GetRandomJokeUseCase],
) -> JokeResponse:
    """Get a random stored joke.

    Raises:
        HTTPException: If no joke has been stored yet
    """
    joke = await get_random_joke_use_case.execute()
    if not joke:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No jokes stored yet",
        )
    return joke


@router.get("/best", response_model=JokeResponse)
async def get_best_joke(
    get_best_joke_use_case: FromDishka[GetBestJokeUseCase],
) -> JokeResponse:
    """Get the highest scoring joke.

    Raises:
        HTTPException: If no joke has been ranked yet
    """
    joke = await get_best_joke_use_case.execute()
    if not joke:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No jokes have been ranked yet",
        )
    return joke
