"""
Database configuration settings.

Manages PostgreSQL connection parameters for the async SQLAlchemy engine
that writes the search index.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the upsert stage
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """PostgreSQL (pgvector) database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="", description="PostgreSQL connection string (DATABASE_URL)")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Return the connection string with an async driver.

        Plain ``postgres://`` and ``postgresql://`` URLs are rewritten to
        ``postgresql+asyncpg://``. URLs that already name a driver are kept.

        Returns:
            str: SQLAlchemy async-compatible database URL (empty when unset)
        """
        if self.url.startswith("postgres://"):
            return self.url.replace("postgres://", "postgresql+asyncpg://", 1)
        if self.url.startswith("postgresql://"):
            return self.url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return self.url
