"""
Traffic and weather telemetry GraphQL type definitions
"""

from datetime import datetime
from uuid import UUID

import strawberry

from ...broadcast.models import TrafficUpdate, WeatherUpdate
from ...dbmodels import TrafficData as TrafficRow
from ...dbmodels import WeatherData as WeatherRow
from .map import Map, load_map


@strawberry.type
class TrafficData:
    id: strawberry.ID
    traffic_level: str
    timestamp: datetime
    map_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: TrafficRow) -> "TrafficData":
        return cls(
            id=strawberry.ID(str(row.id)),
            traffic_level=row.traffic_level,
            timestamp=row.timestamp,
            map_id=row.map_id,
        )

    @classmethod
    def from_update(cls, update: TrafficUpdate) -> "TrafficData":
        return cls(
            id=strawberry.ID(str(update.id)),
            traffic_level=update.traffic_level,
            timestamp=update.timestamp,
            map_id=update.map_id,
        )

    def to_update(self) -> TrafficUpdate:
        return TrafficUpdate(
            id=UUID(self.id),
            traffic_level=self.traffic_level,
            timestamp=self.timestamp,
            map_id=self.map_id,
        )

    @strawberry.field
    async def map(self, info: strawberry.Info) -> Map:
        return await load_map(info, self.map_id)


@strawberry.type
class WeatherData:
    id: strawberry.ID
    temperature: float
    conditions: str
    timestamp: datetime
    map_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: WeatherRow) -> "WeatherData":
        return cls(
            id=strawberry.ID(str(row.id)),
            temperature=row.temperature,
            conditions=row.conditions,
            timestamp=row.timestamp,
            map_id=row.map_id,
        )

    @classmethod
    def from_update(cls, update: WeatherUpdate) -> "WeatherData":
        return cls(
            id=strawberry.ID(str(update.id)),
            temperature=update.temperature,
            conditions=update.conditions,
            timestamp=update.timestamp,
            map_id=update.map_id,
        )

    def to_update(self) -> WeatherUpdate:
        return WeatherUpdate(
            id=UUID(self.id),
            temperature=self.temperature,
            conditions=self.conditions,
            timestamp=self.timestamp,
            map_id=self.map_id,
        )

    @strawberry.field
    async def map(self, info: strawberry.Info) -> Map:
        return await load_map(info, self.map_id)
