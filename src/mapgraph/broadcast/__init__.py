"""Topic-based broadcast used by the GraphQL subscriptions."""

from .base import Broadcast, Topic
from .factory import create_broadcast
from .memory import MemoryBroadcast
from .models import TrafficUpdate, WeatherUpdate

__all__ = [
    "Broadcast",
    "MemoryBroadcast",
    "Topic",
    "TrafficUpdate",
    "WeatherUpdate",
    "create_broadcast",
]
