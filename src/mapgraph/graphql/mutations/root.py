"""
Root GraphQL mutation definitions
"""

from datetime import datetime

import strawberry

from ..scalars import Json
from ..types.feedback import Comment, Favorite
from ..types.map import Event, Map, Media, Place, Route
from ..types.telemetry import TrafficData, WeatherData
from ..types.user import MapStyle, NavigationHistory, Subscription, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self, info: strawberry.Info, name: str, email: str, password: str
    ) -> User:
        """Create a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, name, email, password)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        """Update an existing user."""
        from ..resolvers.user import update_user

        return await update_user(info, id, name=name, email=email, password=password)

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> User:
        """Delete a user."""
        from ..resolvers.user import delete_user

        return await delete_user(info, id)

    # Map mutations
    @strawberry.mutation(name="createMap")
    async def create_map(
        self, info: strawberry.Info, name: str, type: str, owner_id: strawberry.ID
    ) -> Map:
        """Create a new map owned by a user."""
        from ..resolvers.map import create_map

        return await create_map(info, name, type, owner_id)

    @strawberry.mutation(name="updateMap")
    async def update_map(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        type: str | None = None,
    ) -> Map:
        """Update an existing map."""
        from ..resolvers.map import update_map

        return await update_map(info, id, name=name, type=type)

    @strawberry.mutation(name="deleteMap")
    async def delete_map(self, info: strawberry.Info, id: strawberry.ID) -> Map:
        """Delete a map."""
        from ..resolvers.map import delete_map

        return await delete_map(info, id)

    # Place mutations
    @strawberry.mutation(name="createPlace")
    async def create_place(
        self,
        info: strawberry.Info,
        name: str,
        type: str,
        latitude: float,
        longitude: float,
        map_id: strawberry.ID,
    ) -> Place:
        from ..resolvers.map import create_place

        return await create_place(info, name, type, latitude, longitude, map_id)

    @strawberry.mutation(name="updatePlace")
    async def update_place(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        type: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> Place:
        from ..resolvers.map import update_place

        return await update_place(
            info, id, name=name, type=type, latitude=latitude, longitude=longitude
        )

    @strawberry.mutation(name="deletePlace")
    async def delete_place(self, info: strawberry.Info, id: strawberry.ID) -> Place:
        from ..resolvers.map import delete_place

        return await delete_place(info, id)

    # Route mutations
    @strawberry.mutation(name="createRoute")
    async def create_route(
        self,
        info: strawberry.Info,
        name: str,
        origin_id: strawberry.ID,
        destination_id: strawberry.ID,
        distance: float,
        duration: int,
        map_id: strawberry.ID,
    ) -> Route:
        from ..resolvers.map import create_route

        return await create_route(
            info, name, origin_id, destination_id, distance, duration, map_id
        )

    @strawberry.mutation(name="updateRoute")
    async def update_route(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        distance: float | None = None,
        duration: int | None = None,
    ) -> Route:
        from ..resolvers.map import update_route

        return await update_route(info, id, name=name, distance=distance, duration=duration)

    @strawberry.mutation(name="deleteRoute")
    async def delete_route(self, info: strawberry.Info, id: strawberry.ID) -> Route:
        from ..resolvers.map import delete_route

        return await delete_route(info, id)

    # Favorite mutations
    @strawberry.mutation(name="createFavorite")
    async def create_favorite(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        place_id: strawberry.ID | None = None,
        route_id: strawberry.ID | None = None,
    ) -> Favorite:
        """Favorite a place or a route."""
        from ..resolvers.feedback import create_favorite

        return await create_favorite(info, user_id, place_id=place_id, route_id=route_id)

    @strawberry.mutation(name="deleteFavorite")
    async def delete_favorite(self, info: strawberry.Info, id: strawberry.ID) -> Favorite:
        from ..resolvers.feedback import delete_favorite

        return await delete_favorite(info, id)

    # Subscription (billing) mutations
    @strawberry.mutation(name="createSubscription")
    async def create_subscription(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        plan_type: str,
        expiration: datetime,
    ) -> Subscription:
        from ..resolvers.user import create_subscription

        return await create_subscription(info, user_id, plan_type, expiration)

    @strawberry.mutation(name="deleteSubscription")
    async def delete_subscription(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> Subscription:
        from ..resolvers.user import delete_subscription

        return await delete_subscription(info, id)

    # Traffic mutations
    @strawberry.mutation(name="createTrafficData")
    async def create_traffic_data(
        self, info: strawberry.Info, traffic_level: str, map_id: strawberry.ID
    ) -> TrafficData:
        """Record a traffic sample and notify trafficUpdated subscribers."""
        from ..resolvers.telemetry import create_traffic_data

        return await create_traffic_data(info, traffic_level, map_id)

    @strawberry.mutation(name="updateTrafficData")
    async def update_traffic_data(
        self, info: strawberry.Info, id: strawberry.ID, traffic_level: str
    ) -> TrafficData:
        from ..resolvers.telemetry import update_traffic_data

        return await update_traffic_data(info, id, traffic_level)

    @strawberry.mutation(name="deleteTrafficData")
    async def delete_traffic_data(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> TrafficData:
        from ..resolvers.telemetry import delete_traffic_data

        return await delete_traffic_data(info, id)

    # Weather mutations
    @strawberry.mutation(name="createWeatherData")
    async def create_weather_data(
        self,
        info: strawberry.Info,
        temperature: float,
        conditions: str,
        map_id: strawberry.ID,
    ) -> WeatherData:
        """Record a weather sample and notify weatherUpdated subscribers."""
        from ..resolvers.telemetry import create_weather_data

        return await create_weather_data(info, temperature, conditions, map_id)

    @strawberry.mutation(name="updateWeatherData")
    async def update_weather_data(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        temperature: float,
        conditions: str,
    ) -> WeatherData:
        from ..resolvers.telemetry import update_weather_data

        return await update_weather_data(info, id, temperature, conditions)

    @strawberry.mutation(name="deleteWeatherData")
    async def delete_weather_data(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> WeatherData:
        from ..resolvers.telemetry import delete_weather_data

        return await delete_weather_data(info, id)

    # Comment mutations
    @strawberry.mutation(name="createComment")
    async def create_comment(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        text: str,
        rating: int,
        place_id: strawberry.ID | None = None,
        route_id: strawberry.ID | None = None,
    ) -> Comment:
        """Comment on a place or a route."""
        from ..resolvers.feedback import create_comment

        return await create_comment(
            info, user_id, text, rating, place_id=place_id, route_id=route_id
        )

    @strawberry.mutation(name="updateComment")
    async def update_comment(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        text: str | None = None,
        rating: int | None = None,
    ) -> Comment:
        from ..resolvers.feedback import update_comment

        return await update_comment(info, id, text=text, rating=rating)

    @strawberry.mutation(name="deleteComment")
    async def delete_comment(self, info: strawberry.Info, id: strawberry.ID) -> Comment:
        from ..resolvers.feedback import delete_comment

        return await delete_comment(info, id)

    # Media mutations
    @strawberry.mutation(name="createMedia")
    async def create_media(
        self, info: strawberry.Info, url: str, type: str, place_id: strawberry.ID
    ) -> Media:
        from ..resolvers.map import create_media

        return await create_media(info, url, type, place_id)

    @strawberry.mutation(name="deleteMedia")
    async def delete_media(self, info: strawberry.Info, id: strawberry.ID) -> Media:
        from ..resolvers.map import delete_media

        return await delete_media(info, id)

    # Navigation history mutations
    @strawberry.mutation(name="createNavigationHistory")
    async def create_navigation_history(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        action: str,
        details: str | None = None,
    ) -> NavigationHistory:
        from ..resolvers.user import create_navigation_history

        return await create_navigation_history(info, user_id, action, details=details)

    @strawberry.mutation(name="deleteNavigationHistory")
    async def delete_navigation_history(
        self, info: strawberry.Info, id: strawberry.ID
    ) -> NavigationHistory:
        from ..resolvers.user import delete_navigation_history

        return await delete_navigation_history(info, id)

    # Map style mutations
    @strawberry.mutation(name="createMapStyle")
    async def create_map_style(
        self,
        info: strawberry.Info,
        user_id: strawberry.ID,
        name: str,
        style: Json,
        is_default: bool,
    ) -> MapStyle:
        from ..resolvers.user import create_map_style

        return await create_map_style(info, user_id, name, style, is_default)

    @strawberry.mutation(name="deleteMapStyle")
    async def delete_map_style(self, info: strawberry.Info, id: strawberry.ID) -> MapStyle:
        from ..resolvers.user import delete_map_style

        return await delete_map_style(info, id)

    # Event mutations
    @strawberry.mutation(name="createEvent")
    async def create_event(
        self,
        info: strawberry.Info,
        name: str,
        start_time: datetime,
        end_time: datetime,
        map_id: strawberry.ID,
        description: str | None = None,
    ) -> Event:
        from ..resolvers.map import create_event

        return await create_event(
            info, name, start_time, end_time, map_id, description=description
        )

    @strawberry.mutation(name="updateEvent")
    async def update_event(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = None,
        description: str | None = None,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
    ) -> Event:
        from ..resolvers.map import update_event

        return await update_event(
            info,
            id,
            name=name,
            description=description,
            start_time=start_time,
            end_time=end_time,
        )

    @strawberry.mutation(name="deleteEvent")
    async def delete_event(self, info: strawberry.Info, id: strawberry.ID) -> Event:
        from ..resolvers.map import delete_event

        return await delete_event(info, id)
