"""
Core business logic module.

Contains the exception hierarchy and the indexing pipeline.
"""

from search_indexer.core.exceptions import (
    DecodeError,
    IndexingError,
    ProviderError,
    StorageError,
)

__all__ = [
    "IndexingError",
    "DecodeError",
    "ProviderError",
    "StorageError",
]
