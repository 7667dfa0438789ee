"""
Embedding provider boundary.

Exports: EmbeddingClient, LangChainEmbeddingClient, build_embeddings_factory
"""

from search_indexer.boundary.embeddings.client import (
    EmbeddingClient,
    EmbeddingsFactory,
    LangChainEmbeddingClient,
)
from search_indexer.boundary.embeddings.providers import build_embeddings_factory

__all__ = [
    "EmbeddingClient",
    "EmbeddingsFactory",
    "LangChainEmbeddingClient",
    "build_embeddings_factory",
]
