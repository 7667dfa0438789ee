"""
Models for the indexing pipeline.

Exports: IndexJob, Chunk, Embedding, PipelineResult, JobOutcome, JobStatus
"""

from .chunk import Chunk, Embedding
from .job import IndexJob
from .job_outcome import JobOutcome, JobStatus
from .pipeline_result import PipelineResult

__all__ = [
    "IndexJob",
    "Chunk",
    "Embedding",
    "PipelineResult",
    "JobOutcome",
    "JobStatus",
]
