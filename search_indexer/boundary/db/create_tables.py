"""
Database table creation script.

Creates the pgvector extension (PostgreSQL only) and the search_index table.

Dependencies: sqlalchemy, search_indexer.configs
System role: Database schema initialization

Usage:
    python -m search_indexer.boundary.db.create_tables
"""

import asyncio

from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from search_indexer.boundary.db.base import Base
from search_indexer.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from search_indexer.boundary.db.models import SearchIndexModel, set_embedding_dimensions  # noqa: F401
from search_indexer.configs import get_settings


async def create_all_tables(engine: AsyncEngine, dimensions: int | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: uses CREATE ... IF NOT EXISTS, so safe to run repeatedly.

    Args:
        engine: Async engine for the target database
        dimensions: Embedding column width (defaults to EMBEDDING_DIMENSIONS)

    Raises:
        ValueError: When dimensions is not positive
        SQLAlchemyError: If the connection fails or the vector extension is unavailable
    """
    if dimensions is None:
        dimensions = get_settings().embedding.dimensions
    set_embedding_dimensions(dimensions)

    async with engine.begin() as conn:
        if conn.dialect.name == "postgresql":
            await conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all tables registered with Base.metadata.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Async engine for the target database
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _main() -> None:
    engine = get_async_engine()
    try:
        await create_all_tables(engine)
        print("search_index table created successfully.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    load_dotenv()
    asyncio.run(_main())
