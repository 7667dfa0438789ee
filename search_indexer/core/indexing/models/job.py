"""
Indexing job schema.

Validates payloads popped from the Redis queue. The producer serializes
one flat JSON object per job.

Dependencies: pydantic
System role: Data validation and contract definition for queued jobs
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class IndexJob(BaseModel):
    """Request to (re-)index one document."""

    document_id: UUID = Field(..., description="Document whose search rows are replaced")
    content: str = Field(..., description="Full document text to chunk and embed")
    model: str = Field(..., min_length=1, description="Embedding model identifier")

    # Producers may send extra keys (e.g. chunk_strategy); they are ignored.
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        json_schema_extra={
            "example": {
                "document_id": "550e8400-e29b-41d4-a716-446655440000",
                "content": "Quarterly revenue grew by twelve percent.",
                "model": "models/gemini-embedding-001",
            }
        },
    )
