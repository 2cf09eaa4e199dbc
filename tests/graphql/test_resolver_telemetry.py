"""
Unit tests for telemetry resolvers with the database session mocked out
"""

import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import strawberry

from mapgraph.broadcast import Topic, TrafficUpdate, WeatherUpdate
from mapgraph.dbmodels import TrafficData, WeatherData
from mapgraph.errors import ConstraintViolationError
from mapgraph.graphql.resolvers.telemetry import create_traffic_data, create_weather_data


@pytest.fixture
def calls():
    return []


@pytest.fixture
def mock_info(calls):
    broadcast = MagicMock()

    async def publish(topic, payload):
        calls.append(("publish", topic, payload))

    broadcast.publish = AsyncMock(side_effect=publish)
    info = MagicMock(spec=strawberry.Info)
    info.context = {"broadcast": broadcast, "loaders": MagicMock()}
    return info


def session_factory(calls):
    @asynccontextmanager
    async def get_async_session():
        yield MagicMock()
        calls.append(("commit",))

    return get_async_session


@pytest.mark.asyncio
async def test_create_traffic_publishes_after_commit(mock_info, calls):
    map_id = uuid.uuid4()
    row = TrafficData(
        id=uuid.uuid4(), traffic_level="high", timestamp=datetime.now(UTC), map_id=map_id
    )

    with (
        patch(
            "mapgraph.graphql.resolvers.telemetry.get_async_session", session_factory(calls)
        ),
        patch(
            "mapgraph.graphql.resolvers.telemetry.repository.create",
            AsyncMock(return_value=row),
        ) as create,
    ):
        result = await create_traffic_data(mock_info, "high", str(map_id))

    assert create.await_args.kwargs == {"traffic_level": "high", "map_id": map_id}
    assert [call[0] for call in calls] == ["commit", "publish"]
    _, topic, payload = calls[1]
    assert topic is Topic.TRAFFIC_UPDATED
    assert payload == TrafficUpdate(
        id=row.id, traffic_level="high", timestamp=row.timestamp, map_id=map_id
    )
    assert result.id == str(row.id)
    assert result.traffic_level == "high"


@pytest.mark.asyncio
async def test_create_weather_publishes_to_weather_topic(mock_info, calls):
    map_id = uuid.uuid4()
    row = WeatherData(
        id=uuid.uuid4(),
        temperature=9.5,
        conditions="fog",
        timestamp=datetime.now(UTC),
        map_id=map_id,
    )

    with (
        patch(
            "mapgraph.graphql.resolvers.telemetry.get_async_session", session_factory(calls)
        ),
        patch(
            "mapgraph.graphql.resolvers.telemetry.repository.create",
            AsyncMock(return_value=row),
        ),
    ):
        await create_weather_data(mock_info, 9.5, "fog", str(map_id))

    _, topic, payload = calls[1]
    assert topic is Topic.WEATHER_UPDATED
    assert isinstance(payload, WeatherUpdate)
    assert payload.conditions == "fog"


@pytest.mark.asyncio
async def test_rejected_create_publishes_nothing(mock_info, calls):
    with (
        patch(
            "mapgraph.graphql.resolvers.telemetry.get_async_session", session_factory(calls)
        ),
        patch(
            "mapgraph.graphql.resolvers.telemetry.repository.create",
            AsyncMock(side_effect=ConstraintViolationError("TrafficData", "no such map")),
        ),
    ):
        with pytest.raises(ConstraintViolationError):
            await create_traffic_data(mock_info, "high", str(uuid.uuid4()))

    mock_info.context["broadcast"].publish.assert_not_awaited()
