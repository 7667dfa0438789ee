"""
Database boundary.

Exports: Base, SearchIndexModel, get_async_engine, get_async_session_factory
"""

from search_indexer.boundary.db.base import Base
from search_indexer.boundary.db.connection import get_async_engine, get_async_session_factory
from search_indexer.boundary.db.models import SearchIndexModel

__all__ = [
    "Base",
    "SearchIndexModel",
    "get_async_engine",
    "get_async_session_factory",
]
