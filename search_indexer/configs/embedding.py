"""
Embedding provider configuration settings.

Selects the LangChain embeddings integration and the vector width of the
search index column.

Dependencies: pydantic, pydantic_settings
System role: Embedding adapter configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["gemini", "bedrock"] = Field(
        default="gemini",
        description="Embeddings integration: 'gemini' (Google GenAI) or 'bedrock' (Amazon)",
    )
    dimensions: int = Field(
        default=1024,
        gt=0,
        description="Width of the search_index.embedding column",
    )
    expected_dimensions: int | None = Field(
        default=None,
        gt=0,
        description="Reject provider vectors of any other width before writing (unset disables)",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock embeddings")
