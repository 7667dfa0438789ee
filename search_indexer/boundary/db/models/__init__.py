"""ORM models for the search index."""

from search_indexer.boundary.db.models.search_index_model import (
    SearchIndexModel,
    set_embedding_dimensions,
)

__all__ = ["SearchIndexModel", "set_embedding_dimensions"]
