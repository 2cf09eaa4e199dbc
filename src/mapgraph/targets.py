"""
Target references for records that attach to either a place or a route.

Favorites and comments point at most at one of the two. The GraphQL
arguments stay as two optional ids; this module folds them into a single
tagged value and back into the two nullable columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from .errors import ConstraintViolationError


@dataclass(frozen=True)
class PlaceRef:
    id: UUID


@dataclass(frozen=True)
class RouteRef:
    id: UUID


TargetRef = PlaceRef | RouteRef


def target_from_ids(entity: str, place_id: UUID | None, route_id: UUID | None) -> TargetRef | None:
    """Build a target reference from the optional place and route ids.

    Raises:
        ConstraintViolationError: if both ids are supplied
    """
    if place_id is not None and route_id is not None:
        raise ConstraintViolationError(entity, "at most one of placeId/routeId may be given")
    if place_id is not None:
        return PlaceRef(place_id)
    if route_id is not None:
        return RouteRef(route_id)
    return None


def target_columns(target: TargetRef | None) -> dict[str, UUID | None]:
    """Spread a target reference over the place_id/route_id columns."""
    if isinstance(target, PlaceRef):
        return {"place_id": target.id, "route_id": None}
    if isinstance(target, RouteRef):
        return {"place_id": None, "route_id": target.id}
    return {"place_id": None, "route_id": None}
