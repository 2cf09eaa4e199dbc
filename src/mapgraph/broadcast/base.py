"""Core broadcast interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from enum import Enum

from pydantic import BaseModel


class Topic(str, Enum):
    """Named broadcast channels."""

    TRAFFIC_UPDATED = "TRAFFIC_UPDATED"
    WEATHER_UPDATED = "WEATHER_UPDATED"


class Broadcast(ABC):
    """Topic-keyed publish/subscribe channel.

    Publishing is fire-and-forget: there is no acknowledgement, no
    persistence and no replay for subscribers that join later. Payloads
    cross the channel as JSON text so every backend delivers the same shape.
    """

    @abstractmethod
    async def publish(self, topic: Topic, payload: BaseModel) -> None:
        """Send a payload to every current subscriber of ``topic``."""
        pass

    @abstractmethod
    def subscribe(self, topic: Topic) -> AsyncIterator[str]:
        """Yield every payload published to ``topic`` from now on, in order.

        The iterator runs until the consumer stops iterating (client
        disconnect); closing it releases the subscription.
        """
        pass

    async def close(self) -> None:
        """Release backend resources."""
        return None
