"""In-process broadcast backend."""

from __future__ import annotations

import asyncio
from collections import defaultdict
from collections.abc import AsyncIterator

from pydantic import BaseModel

from ..logging import get_logger
from .base import Broadcast, Topic

logger = get_logger(__name__)


class MemoryBroadcast(Broadcast):
    """Fan-out over one bounded asyncio queue per subscriber.

    A subscriber whose queue is full misses the event; publishers never wait.
    """

    def __init__(self, queue_size: int = 100):
        self.queue_size = queue_size
        self._subscribers: dict[Topic, set[asyncio.Queue[str | None]]] = defaultdict(set)

    def subscriber_count(self, topic: Topic) -> int:
        return len(self._subscribers.get(topic, ()))

    async def publish(self, topic: Topic, payload: BaseModel) -> None:
        message = payload.model_dump_json()
        queues = list(self._subscribers.get(topic, ()))
        for queue in queues:
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                logger.warning("Subscriber queue full, dropping event", topic=topic.value)
        logger.debug("Broadcast published", topic=topic.value, subscribers=len(queues))

    def subscribe(self, topic: Topic) -> AsyncIterator[str]:
        # Register now so events published before the first read are kept
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self.queue_size)
        self._subscribers[topic].add(queue)
        logger.debug("Broadcast subscriber added", topic=topic.value)
        return self._drain(topic, queue)

    async def _drain(self, topic: Topic, queue: asyncio.Queue[str | None]) -> AsyncIterator[str]:
        try:
            while True:
                message = await queue.get()
                if message is None:
                    return
                yield message
        finally:
            self._subscribers[topic].discard(queue)
            logger.debug("Broadcast subscriber removed", topic=topic.value)

    async def close(self) -> None:
        """End every open stream and forget its subscriber."""
        for queues in self._subscribers.values():
            for queue in queues:
                # None ends the stream; make room for it if the reader is behind
                if queue.full():
                    queue.get_nowait()
                queue.put_nowait(None)
        self._subscribers.clear()
