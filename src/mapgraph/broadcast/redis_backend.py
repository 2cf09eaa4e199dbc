"""Redis pub/sub broadcast backend, for deployments running several API processes."""

from __future__ import annotations

from collections.abc import AsyncIterator

import redis.asyncio as redis
from pydantic import BaseModel

from ..logging import get_logger
from .base import Broadcast, Topic

logger = get_logger(__name__)


class RedisBroadcast(Broadcast):
    """Publish to and listen on Redis channels named after the topics."""

    def __init__(self, client: redis.Redis):
        self._redis = client

    async def publish(self, topic: Topic, payload: BaseModel) -> None:
        json_data = payload.model_dump_json()
        receivers = await self._redis.publish(topic.value, json_data)
        logger.debug(
            "Broadcast published to Redis",
            topic=topic.value,
            receivers=receivers,
            data_length=len(json_data),
        )

    async def subscribe(self, topic: Topic) -> AsyncIterator[str]:
        pubsub = self._redis.pubsub()
        await pubsub.subscribe(topic.value)
        logger.info("Subscribed to Redis channel", topic=topic.value)
        try:
            async for message in pubsub.listen():
                if message.get("type") != "message":
                    continue
                data = message["data"]
                yield data.decode() if isinstance(data, bytes) else data
        finally:
            await pubsub.unsubscribe(topic.value)
            await pubsub.aclose()
            logger.info("Unsubscribed from Redis channel", topic=topic.value)
