"""
Root GraphQL subscription definitions
"""

from collections.abc import AsyncGenerator

import strawberry

from ..types.telemetry import TrafficData, WeatherData


@strawberry.type
class SubscriptionRoot:
    """Root GraphQL subscription type.

    Named apart from the billing ``Subscription`` object type.
    """

    @strawberry.subscription
    async def traffic_updated(
        self, info: strawberry.Info
    ) -> AsyncGenerator[TrafficData, None]:
        """Every traffic sample created while the stream is open."""
        from ..resolvers.telemetry import traffic_updates

        async for traffic in traffic_updates(info):
            yield traffic

    @strawberry.subscription
    async def weather_updated(
        self, info: strawberry.Info
    ) -> AsyncGenerator[WeatherData, None]:
        """Every weather sample created while the stream is open."""
        from ..resolvers.telemetry import weather_updates

        async for weather in weather_updates(info):
            yield weather
