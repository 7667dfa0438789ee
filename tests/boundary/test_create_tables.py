"""Tests for schema creation."""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateTable

from search_indexer.boundary.db.create_tables import create_all_tables, drop_all_tables
from search_indexer.boundary.db.models import SearchIndexModel, set_embedding_dimensions


def _memory_engine():
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _postgres_ddl() -> str:
    return str(CreateTable(SearchIndexModel.__table__).compile(dialect=postgresql.dialect()))


def _table_columns(conn):
    inspector = inspect(conn)
    if "search_index" not in inspector.get_table_names():
        return None
    return {
        "columns": [column["name"] for column in inspector.get_columns("search_index")],
        "pk": inspector.get_pk_constraint("search_index")["constrained_columns"],
    }


@pytest.mark.asyncio
async def test_create_and_drop_search_index_table() -> None:
    engine = _memory_engine()
    try:
        await create_all_tables(engine)
        # Idempotent
        await create_all_tables(engine)

        async with engine.connect() as conn:
            schema = await conn.run_sync(_table_columns)

        assert schema["columns"] == ["document_id", "chunk_index", "chunk_text", "embedding"]
        assert schema["pk"] == ["document_id", "chunk_index"]

        await drop_all_tables(engine)
        async with engine.connect() as conn:
            assert await conn.run_sync(_table_columns) is None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_embedding_width_comes_from_argument() -> None:
    engine = _memory_engine()
    try:
        await create_all_tables(engine, dimensions=8)

        assert "embedding VECTOR(8) NOT NULL" in _postgres_ddl()
    finally:
        await drop_all_tables(engine)
        await engine.dispose()
        set_embedding_dimensions(1024)


@pytest.mark.asyncio
async def test_embedding_width_defaults_to_settings() -> None:
    settings = MagicMock()
    settings.embedding.dimensions = 768
    engine = _memory_engine()
    try:
        with patch(
            "search_indexer.boundary.db.create_tables.get_settings", return_value=settings
        ):
            await create_all_tables(engine)

        assert "embedding VECTOR(768) NOT NULL" in _postgres_ddl()
    finally:
        await drop_all_tables(engine)
        await engine.dispose()
        set_embedding_dimensions(1024)


def test_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        set_embedding_dimensions(0)
