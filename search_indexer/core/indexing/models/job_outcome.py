"""
Job outcome model.

Describes what one iteration of the job loop did with a dequeued payload.

Dependencies: pydantic
System role: Return type for JobWorker.process_next()
"""

from enum import Enum

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """Terminal status of a dequeued job."""

    SUCCESS = "success"
    FAILED = "failed"
    DROPPED = "dropped"


class JobOutcome(BaseModel):
    """Outcome of processing one dequeued payload."""

    status: JobStatus
    document_id: str | None = Field(default=None, description="Set once the payload decoded")
    chunk_count: int | None = Field(default=None, description="Rows written on success")
    processing_time_ms: float | None = Field(default=None)
    details: str | None = Field(default=None, description="Error description on failure")
