"""Resolvers for maps and the records placed on a map."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import strawberry
from sqlalchemy.orm import selectinload

from ...database import repository
from ...database.connection import get_async_session
from ...dbmodels import Events, Maps, Media, Places, Routes
from ...logging import get_logger
from ..context import get_loaders

if TYPE_CHECKING:
    from ..types.map import Event as EventType
    from ..types.map import Map as MapType
    from ..types.map import Media as MediaType
    from ..types.map import Place as PlaceType
    from ..types.map import Route as RouteType

logger = get_logger(__name__)


# Query resolvers
async def resolve_maps(info: strawberry.Info) -> list[MapType]:
    """
    Resolve every map.

    Owners are loaded in the same round trip and primed into the user loader,
    so selecting ``owner`` does not query again.
    """
    from ..types.map import Map

    async with get_async_session() as session:
        rows = await repository.list_all(session, Maps, selectinload(Maps.owner))

    users = get_loaders(info).users
    for row in rows:
        users.prime(row.owner_id, row.owner)
    return [Map.from_model(row) for row in rows]


async def resolve_places(info: strawberry.Info) -> list[PlaceType]:
    from ..types.map import Place

    async with get_async_session() as session:
        rows = await repository.list_all(session, Places)
    return [Place.from_model(row) for row in rows]


async def resolve_routes(info: strawberry.Info) -> list[RouteType]:
    from ..types.map import Route

    async with get_async_session() as session:
        rows = await repository.list_all(session, Routes)
    return [Route.from_model(row) for row in rows]


async def resolve_media(info: strawberry.Info) -> list[MediaType]:
    from ..types.map import Media as MediaType

    async with get_async_session() as session:
        rows = await repository.list_all(session, Media)
    return [MediaType.from_model(row) for row in rows]


async def resolve_events(info: strawberry.Info) -> list[EventType]:
    from ..types.map import Event

    async with get_async_session() as session:
        rows = await repository.list_all(session, Events)
    return [Event.from_model(row) for row in rows]


# Map mutations
async def create_map(info: strawberry.Info, name: str, type: str, owner_id: strawberry.ID) -> MapType:
    from ..types.map import Map

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Maps,
            name=name,
            type=type,
            owner_id=repository.parse_parent_id(Maps, owner_id),
        )

    logger.info("Map created", map_id=str(row.id), owner_id=str(row.owner_id), name=name)
    return Map.from_model(row)


async def update_map(
    info: strawberry.Info, id: strawberry.ID, name: str | None = None, type: str | None = None
) -> MapType:
    from ..types.map import Map

    map_id = repository.parse_id(Maps, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(session, Maps, map_id, name=name, type=type)

    logger.info("Map updated", map_id=str(map_id), updated_fields=updated_fields)
    return Map.from_model(row)


async def delete_map(info: strawberry.Info, id: strawberry.ID) -> MapType:
    from ..types.map import Map

    map_id = repository.parse_id(Maps, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Maps, map_id)

    logger.info("Map deleted", map_id=str(map_id))
    return Map.from_model(row)


# Place mutations
async def create_place(
    info: strawberry.Info,
    name: str,
    type: str,
    latitude: float,
    longitude: float,
    map_id: strawberry.ID,
) -> PlaceType:
    from ..types.map import Place

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Places,
            name=name,
            type=type,
            latitude=latitude,
            longitude=longitude,
            map_id=repository.parse_parent_id(Places, map_id),
        )

    logger.info("Place created", place_id=str(row.id), map_id=str(row.map_id), name=name)
    return Place.from_model(row)


async def update_place(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    type: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> PlaceType:
    from ..types.map import Place

    place_id = repository.parse_id(Places, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(
            session,
            Places,
            place_id,
            name=name,
            type=type,
            latitude=latitude,
            longitude=longitude,
        )

    logger.info("Place updated", place_id=str(place_id), updated_fields=updated_fields)
    return Place.from_model(row)


async def delete_place(info: strawberry.Info, id: strawberry.ID) -> PlaceType:
    from ..types.map import Place

    place_id = repository.parse_id(Places, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Places, place_id)

    logger.info("Place deleted", place_id=str(place_id))
    return Place.from_model(row)


# Route mutations
async def create_route(
    info: strawberry.Info,
    name: str,
    origin_id: strawberry.ID,
    destination_id: strawberry.ID,
    distance: float,
    duration: int,
    map_id: strawberry.ID,
) -> RouteType:
    from ..types.map import Route

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Routes,
            name=name,
            origin_id=str(origin_id),
            destination_id=str(destination_id),
            distance=distance,
            duration=duration,
            map_id=repository.parse_parent_id(Routes, map_id),
        )

    logger.info("Route created", route_id=str(row.id), map_id=str(row.map_id), name=name)
    return Route.from_model(row)


async def update_route(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    distance: float | None = None,
    duration: int | None = None,
) -> RouteType:
    from ..types.map import Route

    route_id = repository.parse_id(Routes, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(
            session, Routes, route_id, name=name, distance=distance, duration=duration
        )

    logger.info("Route updated", route_id=str(route_id), updated_fields=updated_fields)
    return Route.from_model(row)


async def delete_route(info: strawberry.Info, id: strawberry.ID) -> RouteType:
    from ..types.map import Route

    route_id = repository.parse_id(Routes, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Routes, route_id)

    logger.info("Route deleted", route_id=str(route_id))
    return Route.from_model(row)


# Media mutations
async def create_media(
    info: strawberry.Info, url: str, type: str, place_id: strawberry.ID
) -> MediaType:
    from ..types.map import Media as MediaType

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Media,
            url=url,
            type=type,
            place_id=repository.parse_parent_id(Media, place_id),
        )

    logger.info("Media created", media_id=str(row.id), place_id=str(row.place_id), type=type)
    return MediaType.from_model(row)


async def delete_media(info: strawberry.Info, id: strawberry.ID) -> MediaType:
    from ..types.map import Media as MediaType

    media_id = repository.parse_id(Media, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Media, media_id)

    logger.info("Media deleted", media_id=str(media_id))
    return MediaType.from_model(row)


# Event mutations
async def create_event(
    info: strawberry.Info,
    name: str,
    start_time: datetime,
    end_time: datetime,
    map_id: strawberry.ID,
    description: str | None = None,
) -> EventType:
    from ..types.map import Event

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Events,
            name=name,
            description=description,
            start_time=start_time,
            end_time=end_time,
            map_id=repository.parse_parent_id(Events, map_id),
        )

    logger.info("Event created", event_id=str(row.id), map_id=str(row.map_id), name=name)
    return Event.from_model(row)


async def update_event(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    description: str | None = None,
    start_time: datetime | None = None,
    end_time: datetime | None = None,
) -> EventType:
    from ..types.map import Event

    event_id = repository.parse_id(Events, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(
            session,
            Events,
            event_id,
            name=name,
            description=description,
            start_time=start_time,
            end_time=end_time,
        )

    logger.info("Event updated", event_id=str(event_id), updated_fields=updated_fields)
    return Event.from_model(row)


async def delete_event(info: strawberry.Info, id: strawberry.ID) -> EventType:
    from ..types.map import Event

    event_id = repository.parse_id(Events, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Events, event_id)

    logger.info("Event deleted", event_id=str(event_id))
    return Event.from_model(row)
