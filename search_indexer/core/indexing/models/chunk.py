"""
Chunk and embedding models for the indexing pipeline.

Dependencies: pydantic
System role: Data structures passed between chunking, embedding and upsert
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Bounded, trimmed slice of a document's text."""

    index: int = Field(ge=0, description="0-based position in emission order")
    text: str = Field(min_length=1, description="Chunk text (never empty)")


class Embedding(BaseModel):
    """Provider vector for one chunk."""

    chunk_index: int = Field(ge=0, description="Index of the chunk this vector belongs to")
    vector: list[float] = Field(description="Embedding vector as returned by the provider")
