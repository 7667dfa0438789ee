"""
Job queue boundary.

Exports: RedisJobQueue, create_redis_client
"""

from search_indexer.boundary.queue.redis_queue import RedisJobQueue, create_redis_client

__all__ = ["RedisJobQueue", "create_redis_client"]
