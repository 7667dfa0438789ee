"""
Document indexing pipeline.

Queue-driven worker: decode job -> chunk -> embed -> transactional upsert.
"""

from .entrypoint import IndexingPipeline
from .job_parser import parse_job_payload
from .worker import JobWorker, WorkerState

__all__ = ["IndexingPipeline", "JobWorker", "WorkerState", "parse_job_payload"]
