"""
Indexing pipeline orchestrator.

Coordinates chunking, embedding, vector conversion and the transactional
upsert for one job. All collaborators are injected; nothing here owns a
connection.

Dependencies: All task modules, boundary.embeddings
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from pydantic import ValidationError

from search_indexer.boundary.embeddings import EmbeddingClient
from search_indexer.core.exceptions import ProviderError

from .models import Embedding, IndexJob, PipelineResult
from .tasks import ChunkingTask, SearchIndexUpsertTask, encode_embeddings

logger = logging.getLogger(__name__)


class IndexingPipeline:
    """Orchestrate document indexing: chunk -> embed -> encode -> upsert."""

    def __init__(
        self,
        chunking_task: ChunkingTask,
        embedding_client: EmbeddingClient,
        upsert_task: SearchIndexUpsertTask,
    ) -> None:
        """
        Initialize pipeline with its stages.

        Args:
            chunking_task: Splits job content into chunks
            embedding_client: Batch embedding capability
            upsert_task: Replaces the document's rows atomically
        """
        self._chunking_task = chunking_task
        self._embedding_client = embedding_client
        self._upsert_task = upsert_task

    async def process(self, job: IndexJob) -> PipelineResult:
        """
        Index one job.

        The provider is called before the transaction opens, so a provider
        failure never touches the stored rows. Content without chunks skips
        the provider and clears the document's rows.

        Args:
            job: Validated job

        Returns:
            PipelineResult: Row count and timing

        Raises:
            ProviderError: Embedding call failed or returned a mismatched or malformed batch
            StorageError: Transaction failed and was rolled back
        """
        start_time = time.perf_counter()
        document_id = str(job.document_id)

        chunks = self._chunking_task.chunk(job.content)
        logger.info(
            f"{__name__}:process - Split into {len(chunks)} chunks",
            extra={"document_id": document_id},
        )

        vectors: list[list[float]] = []
        if chunks:
            vectors = await self._embedding_client.embed(
                job.model, [chunk.text for chunk in chunks]
            )
        if len(vectors) != len(chunks):
            raise ProviderError(
                f"Provider returned {len(vectors)} vectors for {len(chunks)} chunks",
                model=job.model,
                details={"document_id": document_id},
            )

        try:
            embeddings = [
                Embedding(chunk_index=chunk.index, vector=vector)
                for chunk, vector in zip(chunks, vectors)
            ]
        except ValidationError as e:
            raise ProviderError(
                f"Provider returned a malformed vector: {e.errors()[0]['msg']}",
                model=job.model,
                details={"document_id": document_id},
            ) from e
        storage_vectors = encode_embeddings(embeddings)

        chunk_count = await self._upsert_task.replace_document(
            job.document_id,
            [(chunk.text, vector) for chunk, vector in zip(chunks, storage_vectors)],
        )

        return PipelineResult(
            document_id=document_id,
            chunk_count=chunk_count,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )
