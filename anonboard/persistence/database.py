"""Database connection and session management.

Provides async database engine, session factory and the end-of-request
commit or rollback for PostgreSQL.
"""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from anonboard.config import Settings


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
        autocommit=False,  # Explicit transaction management
    )


async def finish_session(
    session: AsyncSession, exception: BaseException | None = None
) -> None:
    """Commit or roll back a request's session.

    Rolls back when the request failed or when a statement already left
    the transaction unusable; commits otherwise.

    Args:
        session: The request's session
        exception: Error the request ended with, if any
    """
    if exception is not None or not session.is_active:
        logfire.warn(
            "Session rollback",
            error=str(exception) if exception is not None else "inactive transaction",
        )
        await session.rollback()
        return

    await session.commit()
    logfire.debug("Session committed")
