"""
Map GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

from ...dbmodels import Comments, Events, Favorites, Maps, Media as MediaRow, Places, Routes
from ...dbmodels import TrafficData as TrafficRow
from ...dbmodels import WeatherData as WeatherRow
from ..context import get_loaders

if TYPE_CHECKING:
    from .feedback import Comment, Favorite  # noqa: F401
    from .telemetry import TrafficData, WeatherData  # noqa: F401
    from .user import User  # noqa: F401


async def load_map(info: strawberry.Info, map_id: UUID) -> "Map":
    row = await get_loaders(info).maps.load(map_id)
    if row is None:
        raise RuntimeError("Map not found")
    return Map.from_model(row)


async def load_place(info: strawberry.Info, place_id: UUID | None) -> "Place | None":
    if place_id is None:
        return None
    row = await get_loaders(info).places.load(place_id)
    return Place.from_model(row) if row is not None else None


async def load_route(info: strawberry.Info, route_id: UUID | None) -> "Route | None":
    if route_id is None:
        return None
    row = await get_loaders(info).routes.load(route_id)
    return Route.from_model(row) if row is not None else None


@strawberry.type
class Map:
    """Map type for GraphQL API."""

    id: strawberry.ID
    name: str
    type: str
    owner_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: Maps) -> "Map":
        return cls(id=strawberry.ID(str(row.id)), name=row.name, type=row.type, owner_id=row.owner_id)

    @property
    def uuid(self) -> UUID:
        return UUID(self.id)

    @strawberry.field
    async def owner(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")]:
        """Get the owner of this map."""
        from .user import load_user

        return await load_user(info, self.owner_id)

    @strawberry.field
    async def places(self, info: strawberry.Info) -> list["Place"] | None:
        rows = await get_loaders(info).children(Places, "map_id").load(self.uuid)
        return [Place.from_model(row) for row in rows]

    @strawberry.field
    async def routes(self, info: strawberry.Info) -> list["Route"] | None:
        rows = await get_loaders(info).children(Routes, "map_id").load(self.uuid)
        return [Route.from_model(row) for row in rows]

    @strawberry.field
    async def traffic(
        self, info: strawberry.Info
    ) -> list[Annotated["TrafficData", strawberry.lazy(".telemetry")]] | None:
        """Traffic samples recorded against this map."""
        from .telemetry import TrafficData

        rows = await get_loaders(info).children(TrafficRow, "map_id").load(self.uuid)
        return [TrafficData.from_model(row) for row in rows]

    @strawberry.field
    async def weather(
        self, info: strawberry.Info
    ) -> list[Annotated["WeatherData", strawberry.lazy(".telemetry")]] | None:
        """Weather samples recorded against this map."""
        from .telemetry import WeatherData

        rows = await get_loaders(info).children(WeatherRow, "map_id").load(self.uuid)
        return [WeatherData.from_model(row) for row in rows]

    @strawberry.field
    async def events(self, info: strawberry.Info) -> list["Event"] | None:
        rows = await get_loaders(info).children(Events, "map_id").load(self.uuid)
        return [Event.from_model(row) for row in rows]


@strawberry.type
class Place:
    id: strawberry.ID
    name: str
    type: str
    latitude: float
    longitude: float
    map_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: Places) -> "Place":
        return cls(
            id=strawberry.ID(str(row.id)),
            name=row.name,
            type=row.type,
            latitude=row.latitude,
            longitude=row.longitude,
            map_id=row.map_id,
        )

    @property
    def uuid(self) -> UUID:
        return UUID(self.id)

    @strawberry.field
    async def map(self, info: strawberry.Info) -> Map:
        return await load_map(info, self.map_id)

    @strawberry.field
    async def media(self, info: strawberry.Info) -> list["Media"] | None:
        rows = await get_loaders(info).children(MediaRow, "place_id").load(self.uuid)
        return [Media.from_model(row) for row in rows]

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".feedback")]] | None:
        from .feedback import Comment

        rows = await get_loaders(info).children(Comments, "place_id").load(self.uuid)
        return [Comment.from_model(row) for row in rows]

    @strawberry.field
    async def favorites(
        self, info: strawberry.Info
    ) -> list[Annotated["Favorite", strawberry.lazy(".feedback")]] | None:
        from .feedback import Favorite

        rows = await get_loaders(info).children(Favorites, "place_id").load(self.uuid)
        return [Favorite.from_model(row) for row in rows]


@strawberry.type
class Route:
    id: strawberry.ID
    name: str
    origin_id: str
    destination_id: str
    distance: float
    duration: int
    map_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: Routes) -> "Route":
        return cls(
            id=strawberry.ID(str(row.id)),
            name=row.name,
            origin_id=row.origin_id,
            destination_id=row.destination_id,
            distance=row.distance,
            duration=row.duration,
            map_id=row.map_id,
        )

    @property
    def uuid(self) -> UUID:
        return UUID(self.id)

    @strawberry.field
    async def map(self, info: strawberry.Info) -> Map:
        return await load_map(info, self.map_id)

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".feedback")]] | None:
        from .feedback import Comment

        rows = await get_loaders(info).children(Comments, "route_id").load(self.uuid)
        return [Comment.from_model(row) for row in rows]

    @strawberry.field
    async def favorites(
        self, info: strawberry.Info
    ) -> list[Annotated["Favorite", strawberry.lazy(".feedback")]] | None:
        from .feedback import Favorite

        rows = await get_loaders(info).children(Favorites, "route_id").load(self.uuid)
        return [Favorite.from_model(row) for row in rows]


@strawberry.type
class Media:
    id: strawberry.ID
    url: str
    type: str
    place_id: strawberry.Private[UUID | None]

    @classmethod
    def from_model(cls, row: MediaRow) -> "Media":
        return cls(id=strawberry.ID(str(row.id)), url=row.url, type=row.type, place_id=row.place_id)

    @strawberry.field
    async def place(self, info: strawberry.Info) -> Place | None:
        return await load_place(info, self.place_id)


@strawberry.type
class Event:
    """Scheduled event shown on a map."""

    id: strawberry.ID
    name: str
    description: str | None
    start_time: datetime
    end_time: datetime
    created_at: datetime
    updated_at: datetime
    map_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: Events) -> "Event":
        return cls(
            id=strawberry.ID(str(row.id)),
            name=row.name,
            description=row.description,
            start_time=row.start_time,
            end_time=row.end_time,
            created_at=row.created_at,
            updated_at=row.updated_at,
            map_id=row.map_id,
        )

    @strawberry.field
    async def map(self, info: strawberry.Info) -> Map:
        return await load_map(info, self.map_id)
