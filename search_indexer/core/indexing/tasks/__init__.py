"""
Indexing pipeline tasks.

Exports: ChunkingTask, SearchIndexUpsertTask, to_storage_vector, encode_embeddings
"""

from .chunking_task import ChunkingTask
from .upsert_task import SearchIndexUpsertTask
from .vector_codec import encode_embeddings, to_storage_vector

__all__ = [
    "ChunkingTask",
    "SearchIndexUpsertTask",
    "to_storage_vector",
    "encode_embeddings",
]
