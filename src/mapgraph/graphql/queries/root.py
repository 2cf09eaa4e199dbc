"""
Root GraphQL query definitions
"""

import strawberry

from ..types.feedback import Comment, Favorite
from ..types.map import Event, Map, Media, Place, Route
from ..types.telemetry import TrafficData, WeatherData
from ..types.user import MapStyle, NavigationHistory, Subscription, User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User] | None:
        """Get every user."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def maps(self, info: strawberry.Info) -> list[Map] | None:
        """Get every map."""
        from ..resolvers.map import resolve_maps

        return await resolve_maps(info)

    @strawberry.field
    async def places(self, info: strawberry.Info) -> list[Place] | None:
        from ..resolvers.map import resolve_places

        return await resolve_places(info)

    @strawberry.field
    async def routes(self, info: strawberry.Info) -> list[Route] | None:
        from ..resolvers.map import resolve_routes

        return await resolve_routes(info)

    @strawberry.field
    async def favorites(self, info: strawberry.Info) -> list[Favorite] | None:
        from ..resolvers.feedback import resolve_favorites

        return await resolve_favorites(info)

    @strawberry.field
    async def subscriptions(self, info: strawberry.Info) -> list[Subscription] | None:
        """Get every billing subscription."""
        from ..resolvers.user import resolve_subscriptions

        return await resolve_subscriptions(info)

    @strawberry.field
    async def traffic_data(self, info: strawberry.Info) -> list[TrafficData] | None:
        from ..resolvers.telemetry import resolve_traffic_data

        return await resolve_traffic_data(info)

    @strawberry.field
    async def weather_data(self, info: strawberry.Info) -> list[WeatherData] | None:
        from ..resolvers.telemetry import resolve_weather_data

        return await resolve_weather_data(info)

    @strawberry.field
    async def comments(self, info: strawberry.Info) -> list[Comment] | None:
        from ..resolvers.feedback import resolve_comments

        return await resolve_comments(info)

    @strawberry.field
    async def media(self, info: strawberry.Info) -> list[Media] | None:
        from ..resolvers.map import resolve_media

        return await resolve_media(info)

    @strawberry.field
    async def navigation_history(self, info: strawberry.Info) -> list[NavigationHistory] | None:
        from ..resolvers.user import resolve_navigation_history

        return await resolve_navigation_history(info)

    @strawberry.field
    async def map_styles(self, info: strawberry.Info) -> list[MapStyle] | None:
        from ..resolvers.user import resolve_map_styles

        return await resolve_map_styles(info)

    @strawberry.field
    async def events(self, info: strawberry.Info) -> list[Event] | None:
        from ..resolvers.map import resolve_events

        return await resolve_events(info)
