"""
Job loop for queue-driven document indexing.

Blocks on the Redis queue, decodes each payload and runs it through the
indexing pipeline, one job at a time. A failing job is logged and dropped;
it never stops the loop or affects the next job.

Dependencies: boundary.queue, entrypoint, job_parser
System role: Worker process main loop
"""

import asyncio
import logging
from enum import Enum

from search_indexer.boundary.queue import RedisJobQueue
from search_indexer.core.exceptions import DecodeError, IndexingError
from search_indexer.observability.log_utils import log_exception_with_context

from .entrypoint import IndexingPipeline
from .job_parser import parse_job_payload
from .models import JobOutcome, JobStatus

logger = logging.getLogger(__name__)


class WorkerState(str, Enum):
    """Job loop states."""

    WAITING = "waiting"
    PROCESSING = "processing"


class JobWorker:
    """Single-job-at-a-time indexing loop."""

    def __init__(self, queue: RedisJobQueue, pipeline: IndexingPipeline) -> None:
        """
        Initialize worker.

        Args:
            queue: Job source
            pipeline: Indexing pipeline invoked per job
        """
        self._queue = queue
        self._pipeline = pipeline
        self._stop_event = asyncio.Event()
        self.state = WorkerState.WAITING

    @property
    def stopping(self) -> bool:
        """Whether stop() has been requested."""
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Ask run() to return after the current iteration."""
        self._stop_event.set()

    async def run(self) -> None:
        """
        Process jobs until stop() is called.

        Raises:
            redis.RedisError: Queue connectivity failure (not a per-job error)
        """
        logger.info(
            f"{__name__}:run - Listening for jobs",
            extra={"queue": self._queue.queue_name},
        )
        while not self.stopping:
            await self.process_next()
        logger.info(f"{__name__}:run - Worker stopped")

    async def process_next(self) -> JobOutcome | None:
        """
        Wait for one job and process it.

        Returns:
            JobOutcome | None: Outcome of the job, or None when the pop timed out
        """
        self.state = WorkerState.WAITING
        payload = await self._queue.pop()
        if payload is None:
            return None

        self.state = WorkerState.PROCESSING
        try:
            return await self.handle_payload(payload)
        finally:
            self.state = WorkerState.WAITING

    async def handle_payload(self, payload: str | bytes) -> JobOutcome:
        """
        Decode and index one payload, converting every failure into an outcome.

        Args:
            payload: Raw queue payload

        Returns:
            JobOutcome: success, failed (pipeline error) or dropped (undecodable)
        """
        try:
            job = parse_job_payload(payload)
        except DecodeError as e:
            log_exception_with_context(logger, f"{__name__}:handle_payload - Dropped job", e)
            return JobOutcome(status=JobStatus.DROPPED, details=str(e))

        document_id = str(job.document_id)
        try:
            result = await self._pipeline.process(job)
        except IndexingError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:handle_payload - Failed to process job",
                e,
                document_id=document_id,
                model=job.model,
            )
            return JobOutcome(status=JobStatus.FAILED, document_id=document_id, details=str(e))
        except Exception as e:  # pylint: disable=broad-except
            log_exception_with_context(
                logger,
                f"{__name__}:handle_payload - Unexpected error while processing job",
                e,
                document_id=document_id,
                model=job.model,
            )
            return JobOutcome(
                status=JobStatus.FAILED,
                document_id=document_id,
                details=f"{type(e).__name__}: {e}",
            )

        logger.info(
            f"{__name__}:handle_payload - Finished job",
            extra={
                "document_id": document_id,
                "chunk_count": result.chunk_count,
                "processing_time_ms": result.processing_time_ms,
            },
        )
        return JobOutcome(
            status=JobStatus.SUCCESS,
            document_id=document_id,
            chunk_count=result.chunk_count,
            processing_time_ms=result.processing_time_ms,
        )
