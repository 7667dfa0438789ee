"""Integration tests for the indexing pipeline against an in-memory database."""

from uuid import uuid4

import pytest

from search_indexer.core.exceptions import ProviderError
from search_indexer.core.indexing.models import IndexJob, PipelineResult
from search_indexer.core.indexing.tasks import ChunkingTask
from tests.conftest import FakeEmbeddingClient, report_content

MODEL = "models/gemini-embedding-001"


def _job(content: str, document_id=None) -> IndexJob:
    return IndexJob(document_id=document_id or uuid4(), content=content, model=MODEL)


async def _stored(upsert_task, document_id):
    return [
        (row.chunk_index, row.chunk_text)
        for row in await upsert_task.fetch_document_rows(document_id)
    ]


@pytest.mark.asyncio
async def test_1200_chars_produce_three_ordered_rows(pipeline, fake_embedding_client, upsert_task) -> None:
    job = _job(report_content(24))

    result = await pipeline.process(job)

    assert isinstance(result, PipelineResult)
    assert result.chunk_count == 3
    assert result.document_id == str(job.document_id)
    stored = await _stored(upsert_task, job.document_id)
    assert [index for index, _ in stored] == [0, 1, 2]
    assert stored[0][1].startswith("Sentence 00")
    assert stored[2][1].startswith("Sentence 20")

    assert len(fake_embedding_client.calls) == 1
    model_id, texts = fake_embedding_client.calls[0]
    assert model_id == MODEL
    assert texts == [text for _, text in stored]


@pytest.mark.asyncio
async def test_rows_match_chunks(pipeline, upsert_task) -> None:
    content = "Intro paragraph.\n\n" + "Body sentence number one. " * 40 + "\n\nClosing words."
    job = _job(content)

    chunks = ChunkingTask(chunk_size=500).chunk(content)
    result = await pipeline.process(job)

    stored = await _stored(upsert_task, job.document_id)
    assert result.chunk_count == len(chunks)
    assert stored == [(chunk.index, chunk.text) for chunk in chunks]


@pytest.mark.asyncio
async def test_empty_content_clears_existing_rows(pipeline, fake_embedding_client, upsert_task) -> None:
    doc_id = uuid4()
    await pipeline.process(_job("Some earlier version of the document.", doc_id))
    fake_embedding_client.calls.clear()

    result = await pipeline.process(_job("", doc_id))

    assert result.chunk_count == 0
    assert await _stored(upsert_task, doc_id) == []
    assert fake_embedding_client.calls == []


@pytest.mark.asyncio
async def test_same_job_twice_is_idempotent(pipeline, upsert_task) -> None:
    job = _job(report_content(30))

    await pipeline.process(job)
    once = await _stored(upsert_task, job.document_id)
    await pipeline.process(job)
    twice = await _stored(upsert_task, job.document_id)

    assert once == twice
    assert len(once) == 3


@pytest.mark.asyncio
async def test_provider_failure_keeps_prior_rows(build_pipeline, pipeline, upsert_task) -> None:
    doc_id = uuid4()
    await pipeline.process(_job("Original text.", doc_id))
    failing = build_pipeline(FakeEmbeddingClient(error=ProviderError("rate limited", model=MODEL)))

    with pytest.raises(ProviderError, match="rate limited"):
        await failing.process(_job("Replacement text that never lands.", doc_id))

    assert await _stored(upsert_task, doc_id) == [(0, "Original text.")]


@pytest.mark.asyncio
async def test_short_batch_raises_and_leaves_storage_unchanged(build_pipeline, pipeline, upsert_task) -> None:
    doc_id = uuid4()
    await pipeline.process(_job("Original text.", doc_id))
    short = build_pipeline(FakeEmbeddingClient(drop=1))

    with pytest.raises(ProviderError, match="2 vectors for 3 chunks"):
        await short.process(_job(report_content(24), doc_id))

    assert await _stored(upsert_task, doc_id) == [(0, "Original text.")]


class MalformedEmbeddingClient(FakeEmbeddingClient):
    """Returns a non-numeric vector for the last text."""

    async def embed(self, model_id: str, texts: list[str]) -> list[list[float]]:
        vectors = await super().embed(model_id, texts)
        vectors[-1] = ["not-a-number"] * self.dimensions
        return vectors


@pytest.mark.asyncio
async def test_malformed_vector_raises_provider_error(build_pipeline, pipeline, upsert_task) -> None:
    doc_id = uuid4()
    await pipeline.process(_job("Original text.", doc_id))
    malformed = build_pipeline(MalformedEmbeddingClient())

    with pytest.raises(ProviderError, match="malformed vector") as exc_info:
        await malformed.process(_job(report_content(24), doc_id))

    assert exc_info.value.details["document_id"] == str(doc_id)
    assert await _stored(upsert_task, doc_id) == [(0, "Original text.")]


@pytest.mark.asyncio
async def test_chunk_size_is_configurable(build_pipeline, fake_embedding_client, upsert_task) -> None:
    small = build_pipeline(fake_embedding_client, chunk_size=100)
    job = _job(report_content(10))

    result = await small.process(job)

    assert result.chunk_count == 5
    assert all(len(text) <= 100 for _, text in await _stored(upsert_task, job.document_id))
