"""
Job queue configuration settings.

Manages the Redis connection and list name the worker blocks on.

Dependencies: pydantic, pydantic_settings
System role: Queue configuration for the job loop
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueueSettings(BaseSettings):
    """Redis list queue configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUEUE_",
        case_sensitive=False,
        extra="ignore",
    )

    redis_url: str = Field(
        default="redis://localhost:6379/0",
        validation_alias=AliasChoices("REDIS_URL", "QUEUE_REDIS_URL"),
        description="Redis connection string",
    )
    name: str = Field(default="vexi_jobs", description="Redis list the producer pushes jobs to")
    pop_timeout: float = Field(
        default=0,
        ge=0,
        description="BLPOP timeout in seconds (0 blocks until a job arrives)",
    )
