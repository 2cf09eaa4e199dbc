"""Factory for creating the broadcast backend."""

from __future__ import annotations

from ..config import Settings
from ..logging import get_logger
from .base import Broadcast
from .memory import MemoryBroadcast

logger = get_logger(__name__)


def create_broadcast(settings: Settings) -> Broadcast:
    """Create the broadcast backend named by ``settings.broadcast_backend``.

    Raises:
        ValueError: if the backend name is unknown
    """
    backend = settings.broadcast_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory broadcast", queue_size=settings.broadcast_queue_size)
        return MemoryBroadcast(queue_size=settings.broadcast_queue_size)

    if backend == "redis":
        from ..redis_pool import get_redis_client
        from .redis_backend import RedisBroadcast

        logger.info("Using Redis broadcast", redis_url=settings.redis_url)
        return RedisBroadcast(get_redis_client(settings.redis_url))

    raise ValueError(f"Unknown broadcast backend: {settings.broadcast_backend}")
