"""
Database connection management.

Provides the async SQLAlchemy engine and session factory used by the upsert
task. Both are created once per worker process and passed in explicitly.

Dependencies: sqlalchemy, asyncpg, search_indexer.configs
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from search_indexer.configs import get_settings
from search_indexer.configs.database import DatabaseSettings


def get_async_engine(db_config: DatabaseSettings | None = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect stale
    connections left over from long idle periods on the queue.

    Args:
        db_config: Database settings (loaded from environment if None)

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ValueError: DATABASE_URL not set
    """
    db_config = db_config or get_settings().database
    database_url = db_config.async_database_url
    if not database_url:
        raise ValueError("DATABASE_URL environment variable not set")

    return create_async_engine(
        database_url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


def get_async_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep transaction control
    explicit; rows loaded inside a session stay readable after it closes.

    Args:
        engine: Async engine to bind sessions to

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory(engine)
        async with SessionFactory() as session:
            async with session.begin():
                ...
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
