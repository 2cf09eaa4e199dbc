"""Centralized Redis connection pool management.

The pool is created on first use so processes running the in-memory
broadcast never open a Redis connection.
"""

from __future__ import annotations

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from .config import settings
from .logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_client: redis.Redis | None = None


def get_redis_client(redis_url: str | None = None) -> redis.Redis:
    """Get a Redis client backed by the shared connection pool.

    Args:
        redis_url: URL used when the pool does not exist yet (defaults to settings)
    """
    global _pool, _client

    if _client is None:
        _pool = redis.ConnectionPool.from_url(
            redis_url or settings.redis_url,
            decode_responses=True,
            max_connections=50,
            socket_connect_timeout=5,
            health_check_interval=30,
        )
        _client = redis.Redis(connection_pool=_pool)
        logger.info("Redis connection pool initialized", max_connections=50)

    return _client


async def close_redis_pool() -> None:
    """Close the Redis connection pool.

    Call this during application shutdown to cleanly close connections.
    """
    global _pool, _client

    if _client is not None:
        await _client.aclose()
        logger.info("Redis client closed")
    if _pool is not None:
        await _pool.disconnect()
        logger.info("Redis connection pool disconnected")
    _pool = None
    _client = None


async def check_redis_health() -> bool:
    """Check if Redis is healthy and accessible."""
    if _client is None:
        return False
    try:
        await _client.ping()
        return True
    except Exception as e:
        logger.error("Redis health check failed", error=str(e))
        return False
