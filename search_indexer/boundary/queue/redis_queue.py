"""
Redis list job queue.

The producer LPUSHes JSON payloads; the worker BLPOPs them one at a time.
There is no acknowledgement: a popped payload is gone from the queue whether
or not it is processed successfully (at-most-once delivery).

Dependencies: redis
System role: Job source for the worker loop
"""

import logging

import redis.asyncio as redis

logger = logging.getLogger(__name__)


def create_redis_client(redis_url: str) -> redis.Redis:
    """
    Create an async Redis client from a URL.

    Args:
        redis_url: Redis connection URL (redis://host:port/db)

    Returns:
        redis.Redis: Async client (connections are opened lazily)
    """
    return redis.from_url(redis_url)


class RedisJobQueue:
    """Blocking pop from a single Redis list."""

    def __init__(
        self,
        client: redis.Redis,
        queue_name: str = "vexi_jobs",
        timeout: float = 0,
    ) -> None:
        """
        Initialize queue adapter.

        Args:
            client: Async Redis client
            queue_name: Redis list holding serialized jobs
            timeout: BLPOP timeout in seconds (0 blocks until a job arrives)

        Raises:
            ValueError: When queue_name is empty or timeout is negative
        """
        if not queue_name:
            raise ValueError("queue_name cannot be empty")
        if timeout < 0:
            raise ValueError("timeout cannot be negative")

        self._client = client
        self.queue_name = queue_name
        self.timeout = timeout

    async def pop(self) -> str | bytes | None:
        """
        Wait for the next job payload.

        Payloads are decoded as UTF-8. Bytes that are not valid UTF-8 are
        returned as-is so the job is dropped by the parser, not by the queue.

        Returns:
            str | bytes | None: Decoded payload, or None when the timeout elapsed

        Raises:
            redis.RedisError: Connection or protocol failure
        """
        result = await self._client.blpop([self.queue_name], timeout=self.timeout)
        if result is None:
            return None

        _key, payload = result
        logger.debug(
            f"{__name__}:pop - Received payload",
            extra={"queue": self.queue_name, "payload_bytes": len(payload)},
        )
        if isinstance(payload, bytes):
            try:
                return payload.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning(
                    f"{__name__}:pop - Payload is not valid UTF-8",
                    extra={"queue": self.queue_name},
                )
        return payload

    async def close(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._client.aclose()
