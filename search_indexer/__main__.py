"""
Worker process entrypoint.

Loads configuration, builds the process-lifetime dependencies (database
engine, Redis client, embedding client) and runs the job loop until SIGINT
or SIGTERM.

Usage:
    python -m search_indexer

Dependencies: dotenv, all search_indexer layers
System role: Process bootstrap
"""

import asyncio
import logging
import signal

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from search_indexer.boundary.db import get_async_engine, get_async_session_factory
from search_indexer.boundary.embeddings import LangChainEmbeddingClient, build_embeddings_factory
from search_indexer.boundary.queue import RedisJobQueue, create_redis_client
from search_indexer.configs import Settings, get_settings
from search_indexer.core.indexing import IndexingPipeline, JobWorker, WorkerState
from search_indexer.core.indexing.tasks import ChunkingTask, SearchIndexUpsertTask
from search_indexer.observability import configure_logging

logger = logging.getLogger(__name__)


def build_worker(
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
    queue: RedisJobQueue,
) -> JobWorker:
    """
    Wire the pipeline stages and the job loop.

    Args:
        settings: Application settings
        session_factory: Async session factory for the search index database
        queue: Job source

    Returns:
        JobWorker: Ready-to-run worker
    """
    embedding_client = LangChainEmbeddingClient(
        build_embeddings_factory(settings.embedding),
        expected_dimensions=settings.embedding.expected_dimensions,
    )
    pipeline = IndexingPipeline(
        chunking_task=ChunkingTask(chunk_size=settings.chunking.size),
        embedding_client=embedding_client,
        upsert_task=SearchIndexUpsertTask(session_factory),
    )
    return JobWorker(queue, pipeline)


async def run_worker(settings: Settings) -> None:
    """
    Run the worker until a shutdown signal arrives.

    A signal received while a job is in flight lets that job finish; a
    signal received while waiting on the queue cancels the wait.

    Args:
        settings: Application settings
    """
    engine = get_async_engine(settings.database)
    queue = RedisJobQueue(
        create_redis_client(settings.queue.redis_url),
        queue_name=settings.queue.name,
        timeout=settings.queue.pop_timeout,
    )
    worker = build_worker(settings, get_async_session_factory(engine), queue)

    task = asyncio.create_task(worker.run())

    def _shutdown() -> None:
        logger.info(f"{__name__}:run_worker - Shutdown requested")
        worker.stop()
        if worker.state is WorkerState.WAITING:
            task.cancel()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _shutdown)

    try:
        await task
    except asyncio.CancelledError:
        logger.info(f"{__name__}:run_worker - Worker stopped while waiting for jobs")
    finally:
        await queue.close()
        await engine.dispose()


def main() -> None:
    """Console script entry point."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        f"{__name__}:main - Indexing worker starting",
        extra={"environment": settings.environment, "queue": settings.queue.name},
    )
    asyncio.run(run_worker(settings))


if __name__ == "__main__":
    main()
