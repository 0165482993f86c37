"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from punchline.domain.error import StoreUnavailableError
from punchline.interface.api.routes import health, jokes, users, votes
from punchline.util.di.container import create_container, setup_di
from punchline.util.observability import instrument_fastapi


async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """Hide store failures behind a generic retry-later response."""
    logfire.error(
        "Request failed: store unavailable",
        path=request.url.path,
        operation=exc.operation,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable, please try again later"},
    )


def create_app(container: AsyncContainer | None = None, instrument: bool = True) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted
        instrument: Whether to instrument the app with Logfire

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Punchline API",
        description="Scores, ranks and leaderboards for community jokes",
        version="0.1.0",
    )

    if instrument:
        # Instrument FastAPI for automatic tracing of HTTP requests
        instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container(with_fastapi=True))

    app_instance.add_exception_handler(StoreUnavailableError, store_unavailable_handler)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(jokes.router)
    app_instance.include_router(users.router)

    return app_instance
