"""Async PostgreSQL engine and sessions.

One engine per process; one session (and transaction) per request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from learnhub.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine described by ``settings.database``."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Rows returned by a request stay readable after its commit, and the
    collections flush explicitly after each write so ``RETURNING`` rows and
    row locks are visible within the same transaction.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
