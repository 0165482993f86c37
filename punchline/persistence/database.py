"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from punchline.config import Settings
from punchline.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout,
        connect_args={"command_timeout": settings.database.command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


@asynccontextmanager
async def store_errors(operation: str) -> AsyncGenerator[None, None]:
    """Translate connection-level database failures into StoreUnavailableError.

    Constraint violations and programming errors are not translated: they
    are bugs, not outages.

    Args:
        operation: Name of the store call, for logs and the error message
    """
    try:
        yield
    except (OperationalError, InterfaceError, PoolTimeoutError, asyncio.TimeoutError) as e:
        logfire.error("Store call failed", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, type(e).__name__) from e
    except DBAPIError as e:
        if not e.connection_invalidated:
            raise
        logfire.error("Store connection lost", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, "connection invalidated") from e
