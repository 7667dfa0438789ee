"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite search index, deterministic fake embedding client,
pipeline wiring and job payload builders.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import json
import uuid

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from search_indexer.boundary.db.connection import get_async_session_factory
from search_indexer.boundary.db.create_tables import create_all_tables, drop_all_tables
from search_indexer.boundary.embeddings import EmbeddingClient
from search_indexer.core.indexing import IndexingPipeline
from search_indexer.core.indexing.tasks import ChunkingTask, SearchIndexUpsertTask

EMBEDDING_DIMENSIONS = 1024


def fake_vector(text: str, dimensions: int = EMBEDDING_DIMENSIONS) -> list[float]:
    """Deterministic vector derived from the text."""
    seed = sum(ord(ch) for ch in text) % 997
    return [((seed + i) % 100) / 100.0 for i in range(dimensions)]


class FakeEmbeddingClient(EmbeddingClient):
    """
    Deterministic in-process embedding client.

    Args:
        dimensions: Width of every returned vector
        drop: Number of vectors to omit from the end of each response
        error: Exception raised instead of returning vectors
    """

    def __init__(
        self,
        dimensions: int = EMBEDDING_DIMENSIONS,
        drop: int = 0,
        error: Exception | None = None,
    ) -> None:
        self.dimensions = dimensions
        self.drop = drop
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    async def embed(self, model_id: str, texts: list[str]) -> list[list[float]]:
        self.calls.append((model_id, list(texts)))
        if self.error is not None:
            raise self.error
        vectors = [fake_vector(text, self.dimensions) for text in texts]
        return vectors[: len(vectors) - self.drop] if self.drop else vectors


def report_content(sentences: int = 24) -> str:
    """Text made of 50-character sentences ("... report. ")."""
    return "".join(
        f"Sentence {i % 100:02d} describes one part of the big report. "
        for i in range(sentences)
    )


@pytest.fixture
async def async_engine():
    """
    Create in-memory SQLite async database with the search_index table.

    Yields:
        AsyncEngine: Engine shared by every session of the test
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine, dimensions=EMBEDDING_DIMENSIONS)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine):
    """Async session factory bound to the test database."""
    return get_async_session_factory(async_engine)


@pytest.fixture
def upsert_task(session_factory):
    """Upsert task writing to the test database."""
    return SearchIndexUpsertTask(session_factory)


@pytest.fixture
def fake_embedding_client():
    """Well-behaved fake embedding client."""
    return FakeEmbeddingClient()


@pytest.fixture
def build_pipeline(upsert_task):
    """Factory wiring a pipeline around a given embedding client."""

    def _build(embedding_client: EmbeddingClient, chunk_size: int = 500) -> IndexingPipeline:
        return IndexingPipeline(
            chunking_task=ChunkingTask(chunk_size=chunk_size),
            embedding_client=embedding_client,
            upsert_task=upsert_task,
        )

    return _build


@pytest.fixture
def pipeline(build_pipeline, fake_embedding_client):
    """Pipeline using the well-behaved fake client."""
    return build_pipeline(fake_embedding_client)


@pytest.fixture
def make_payload():
    """Build a JSON job payload."""

    def _make(
        document_id: uuid.UUID | None = None,
        content: str = "Hello search index.",
        model: str = "models/gemini-embedding-001",
        **extra,
    ) -> str:
        return json.dumps(
            {
                "document_id": str(document_id or uuid.uuid4()),
                "content": content,
                "model": model,
                **extra,
            }
        )

    return _make
