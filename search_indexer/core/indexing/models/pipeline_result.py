"""
Pipeline result model for document indexing.

Dependencies: pydantic
System role: Return type for IndexingPipeline.process()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of indexing one job."""

    document_id: str = Field(description="Indexed document identifier")
    chunk_count: int = Field(description="Number of rows now stored for the document")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
