"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the worker
"""

from functools import lru_cache

from pydantic import Field

from search_indexer.configs.base import BaseSettings
from search_indexer.configs.chunking import ChunkingSettings
from search_indexer.configs.database import DatabaseSettings
from search_indexer.configs.embedding import EmbeddingSettings
from search_indexer.configs.queue import QueueSettings


class Settings(BaseSettings):
    """Unified worker settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    queue: QueueSettings = Field(default_factory=QueueSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables (and ``.env``) are read once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from search_indexer.configs import get_settings
        settings = get_settings()
    """
    return Settings()
