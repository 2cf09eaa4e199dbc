"""Repository helpers shared by every entity resolver.

Each helper runs inside a caller-owned session and translates store errors
into the application error types. None of them commit; the session context
manager does that.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import delete as sa_delete
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from ..dbmodels import (
    Base,
    Comments,
    Events,
    Favorites,
    Maps,
    MapStyles,
    Media,
    NavigationHistory,
    Places,
    Routes,
    Subscriptions,
    TrafficData,
    Users,
    WeatherData,
    utcnow,
)
from ..errors import ConstraintViolationError, NotFoundError
from ..logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

ENTITY_NAMES: dict[type[Base], str] = {
    Users: "User",
    Maps: "Map",
    Places: "Place",
    Routes: "Route",
    Favorites: "Favorite",
    Subscriptions: "Subscription",
    TrafficData: "TrafficData",
    WeatherData: "WeatherData",
    Comments: "Comment",
    Media: "Media",
    NavigationHistory: "NavigationHistory",
    MapStyles: "MapStyle",
    Events: "Event",
}


def entity_name(model: type[Base]) -> str:
    return ENTITY_NAMES.get(model, model.__name__)


def parse_id(model: type[Base], value: str | UUID) -> UUID:
    """Convert a GraphQL ID into a UUID.

    An id that is not a UUID cannot match any row, so it is reported as
    missing rather than as a malformed argument.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise NotFoundError(entity_name(model), value) from e


def parse_parent_id(model: type[Base], value: str | UUID) -> UUID:
    """Convert a foreign-key GraphQL ID into a UUID.

    A malformed parent id can never reference an existing row, which is a
    referential failure of the record being written.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise ConstraintViolationError(
            entity_name(model), f"referenced id {value!r} does not exist"
        ) from e


def _integrity_detail(error: IntegrityError) -> str:
    return str(error.orig) if error.orig is not None else str(error)


async def list_all(
    session: AsyncSession, model: type[ModelT], *options: ORMOption
) -> Sequence[ModelT]:
    stmt = select(model)
    if options:
        stmt = stmt.options(*options)
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_by_id(session: AsyncSession, model: type[ModelT], id: UUID) -> ModelT:
    row = await session.get(model, id)
    if row is None:
        raise NotFoundError(entity_name(model), id)
    return row


async def create(session: AsyncSession, model: type[ModelT], **values: Any) -> ModelT:
    """Insert a row and flush it so generated values and FK checks happen now."""
    row = model(**values)
    session.add(row)
    try:
        await session.flush()
    except IntegrityError as e:
        detail = _integrity_detail(e)
        logger.debug("Create rejected by store", entity=entity_name(model), detail=detail)
        raise ConstraintViolationError(entity_name(model), detail) from e
    await session.refresh(row)
    return row


async def update(
    session: AsyncSession, model: type[ModelT], id: UUID, **changes: Any
) -> tuple[ModelT, list[str]]:
    """Apply the non-None changes to a row.

    Returns:
        The updated row and the names of the columns that were written.
    """
    row = await get_by_id(session, model, id)
    applied = [key for key, value in changes.items() if value is not None]
    for key in applied:
        setattr(row, key, changes[key])
    if not applied and hasattr(model, "updated_at"):
        # onupdate only fires when some column changes
        row.updated_at = utcnow()

    try:
        await session.flush()
    except IntegrityError as e:
        detail = _integrity_detail(e)
        logger.debug("Update rejected by store", entity=entity_name(model), id=str(id), detail=detail)
        raise ConstraintViolationError(entity_name(model), detail) from e
    await session.refresh(row)
    return row, applied


async def delete(session: AsyncSession, model: type[ModelT], id: UUID) -> ModelT:
    """Delete a row by id and return it as it was before deletion.

    Uses a bulk DELETE so the ORM never rewrites child foreign keys; a parent
    that still has children is refused by the store.
    """
    row = await get_by_id(session, model, id)
    session.expunge(row)
    try:
        await session.execute(sa_delete(model).where(model.id == id))
        await session.flush()
    except IntegrityError as e:
        detail = _integrity_detail(e)
        logger.debug("Delete rejected by store", entity=entity_name(model), id=str(id), detail=detail)
        raise ConstraintViolationError(entity_name(model), detail) from e
    return row


async def children_of(
    session: AsyncSession, model: type[ModelT], column: str, parent_ids: Sequence[UUID]
) -> dict[UUID, list[ModelT]]:
    """Group the rows of ``model`` whose ``column`` is one of ``parent_ids``."""
    fk = getattr(model, column)
    result = await session.execute(select(model).where(fk.in_(parent_ids)))
    grouped: dict[UUID, list[ModelT]] = {key: [] for key in parent_ids}
    for row in result.scalars().all():
        grouped.setdefault(getattr(row, column), []).append(row)
    return grouped


async def by_ids(
    session: AsyncSession, model: type[ModelT], ids: Sequence[UUID]
) -> dict[UUID, ModelT]:
    result = await session.execute(select(model).where(model.id.in_(ids)))
    return {row.id: row for row in result.scalars().all()}
