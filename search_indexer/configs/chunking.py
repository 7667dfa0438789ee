"""
Chunking configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Chunk size bound for the splitter
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkingSettings(BaseSettings):
    """Text splitter configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNK_",
        case_sensitive=False,
        extra="ignore",
    )

    size: int = Field(default=500, gt=0, description="Maximum chunk size in characters")
