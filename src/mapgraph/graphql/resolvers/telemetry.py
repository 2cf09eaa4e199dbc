"""Resolvers for traffic and weather samples.

Creating a sample publishes it on its broadcast topic once the row is
committed, which is what feeds the ``trafficUpdated`` and ``weatherUpdated``
subscriptions.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import strawberry

from ...broadcast import Topic, TrafficUpdate, WeatherUpdate
from ...database import repository
from ...database.connection import get_async_session
from ...dbmodels import TrafficData, WeatherData
from ...logging import get_logger
from ..context import get_broadcast, refresh_loaders

if TYPE_CHECKING:
    from ..types.telemetry import TrafficData as TrafficDataType
    from ..types.telemetry import WeatherData as WeatherDataType

logger = get_logger(__name__)


# Query resolvers
async def resolve_traffic_data(info: strawberry.Info) -> list[TrafficDataType]:
    from ..types.telemetry import TrafficData as TrafficDataType

    async with get_async_session() as session:
        rows = await repository.list_all(session, TrafficData)
    return [TrafficDataType.from_model(row) for row in rows]


async def resolve_weather_data(info: strawberry.Info) -> list[WeatherDataType]:
    from ..types.telemetry import WeatherData as WeatherDataType

    async with get_async_session() as session:
        rows = await repository.list_all(session, WeatherData)
    return [WeatherDataType.from_model(row) for row in rows]


# Traffic mutations
async def create_traffic_data(
    info: strawberry.Info, traffic_level: str, map_id: strawberry.ID
) -> TrafficDataType:
    """Record a traffic sample stamped with the current time and broadcast it."""
    from ..types.telemetry import TrafficData as TrafficDataType

    async with get_async_session() as session:
        row = await repository.create(
            session,
            TrafficData,
            traffic_level=traffic_level,
            map_id=repository.parse_parent_id(TrafficData, map_id),
        )

    traffic = TrafficDataType.from_model(row)
    logger.info(
        "Traffic data created",
        traffic_id=str(row.id),
        map_id=str(row.map_id),
        traffic_level=traffic_level,
    )
    await get_broadcast(info).publish(Topic.TRAFFIC_UPDATED, traffic.to_update())
    return traffic


async def update_traffic_data(
    info: strawberry.Info, id: strawberry.ID, traffic_level: str
) -> TrafficDataType:
    from ..types.telemetry import TrafficData as TrafficDataType

    traffic_id = repository.parse_id(TrafficData, id)
    async with get_async_session() as session:
        row, _ = await repository.update(
            session, TrafficData, traffic_id, traffic_level=traffic_level
        )

    logger.info("Traffic data updated", traffic_id=str(traffic_id), traffic_level=traffic_level)
    return TrafficDataType.from_model(row)


async def delete_traffic_data(info: strawberry.Info, id: strawberry.ID) -> TrafficDataType:
    from ..types.telemetry import TrafficData as TrafficDataType

    traffic_id = repository.parse_id(TrafficData, id)
    async with get_async_session() as session:
        row = await repository.delete(session, TrafficData, traffic_id)

    logger.info("Traffic data deleted", traffic_id=str(traffic_id))
    return TrafficDataType.from_model(row)


# Weather mutations
async def create_weather_data(
    info: strawberry.Info, temperature: float, conditions: str, map_id: strawberry.ID
) -> WeatherDataType:
    """Record a weather sample stamped with the current time and broadcast it."""
    from ..types.telemetry import WeatherData as WeatherDataType

    async with get_async_session() as session:
        row = await repository.create(
            session,
            WeatherData,
            temperature=temperature,
            conditions=conditions,
            map_id=repository.parse_parent_id(WeatherData, map_id),
        )

    weather = WeatherDataType.from_model(row)
    logger.info(
        "Weather data created",
        weather_id=str(row.id),
        map_id=str(row.map_id),
        conditions=conditions,
    )
    await get_broadcast(info).publish(Topic.WEATHER_UPDATED, weather.to_update())
    return weather


async def update_weather_data(
    info: strawberry.Info, id: strawberry.ID, temperature: float, conditions: str
) -> WeatherDataType:
    from ..types.telemetry import WeatherData as WeatherDataType

    weather_id = repository.parse_id(WeatherData, id)
    async with get_async_session() as session:
        row, _ = await repository.update(
            session, WeatherData, weather_id, temperature=temperature, conditions=conditions
        )

    logger.info("Weather data updated", weather_id=str(weather_id))
    return WeatherDataType.from_model(row)


async def delete_weather_data(info: strawberry.Info, id: strawberry.ID) -> WeatherDataType:
    from ..types.telemetry import WeatherData as WeatherDataType

    weather_id = repository.parse_id(WeatherData, id)
    async with get_async_session() as session:
        row = await repository.delete(session, WeatherData, weather_id)

    logger.info("Weather data deleted", weather_id=str(weather_id))
    return WeatherDataType.from_model(row)


# Subscription streams
async def traffic_updates(info: strawberry.Info) -> AsyncGenerator[TrafficDataType, None]:
    from ..types.telemetry import TrafficData as TrafficDataType

    async for message in get_broadcast(info).subscribe(Topic.TRAFFIC_UPDATED):
        refresh_loaders(info)
        yield TrafficDataType.from_update(TrafficUpdate.model_validate_json(message))


async def weather_updates(info: strawberry.Info) -> AsyncGenerator[WeatherDataType, None]:
    from ..types.telemetry import WeatherData as WeatherDataType

    async for message in get_broadcast(info).subscribe(Topic.WEATHER_UPDATED):
        refresh_loaders(info)
        yield WeatherDataType.from_update(WeatherUpdate.model_validate_json(message))
