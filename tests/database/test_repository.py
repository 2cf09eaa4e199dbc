"""
Tests for the shared repository helpers against a migrated database
"""

import asyncio
import uuid
from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.orm import selectinload

from mapgraph.database import repository
from mapgraph.database.connection import get_async_session
from mapgraph.dbmodels import Events, Maps, Places, Users
from mapgraph.errors import ConstraintViolationError, NotFoundError


async def make_user(email: str = "ada@example.com") -> Users:
    async with get_async_session() as session:
        return await repository.create(
            session, Users, name="Ada", email=email, password_hash="x", role="user"
        )


async def make_map(owner_id: uuid.UUID) -> Maps:
    async with get_async_session() as session:
        return await repository.create(session, Maps, name="City A", type="road", owner_id=owner_id)


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_create_generates_id_and_applies_defaults(reset_shared_db_connections):
    user = await make_user()
    assert isinstance(user.id, uuid.UUID)
    assert user.role == "user"

    async with get_async_session() as session:
        rows = await repository.list_all(session, Users)
    assert [row.id for row in rows] == [user.id]


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_create_with_missing_parent_is_constraint_violation(reset_shared_db_connections):
    with pytest.raises(ConstraintViolationError) as exc:
        async with get_async_session() as session:
            await repository.create(
                session, Maps, name="Orphan", type="road", owner_id=uuid.uuid4()
            )
    assert exc.value.entity == "Map"

    async with get_async_session() as session:
        assert await repository.list_all(session, Maps) == []


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_duplicate_email_is_constraint_violation(reset_shared_db_connections):
    await make_user("dup@example.com")
    with pytest.raises(ConstraintViolationError):
        await make_user("dup@example.com")


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_applies_only_supplied_fields(reset_shared_db_connections):
    user = await make_user()
    city = await make_map(user.id)

    async with get_async_session() as session:
        row, applied = await repository.update(session, Maps, city.id, name="City B", type=None)

    assert applied == ["name"]
    assert row.name == "City B"
    assert row.type == "road"


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_without_changes_still_touches_updated_at(reset_shared_db_connections):
    user = await make_user()
    city = await make_map(user.id)
    start = datetime(2026, 5, 1, 9, 0, tzinfo=UTC)
    async with get_async_session() as session:
        event = await repository.create(
            session,
            Events,
            name="Parade",
            start_time=start,
            end_time=start + timedelta(hours=2),
            map_id=city.id,
        )

    await asyncio.sleep(0.01)
    async with get_async_session() as session:
        row, applied = await repository.update(
            session, Events, event.id, name=None, description=None, start_time=None, end_time=None
        )

    assert applied == []
    assert row.name == "Parade"
    assert row.updated_at > event.updated_at


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_update_missing_row_is_not_found(reset_shared_db_connections):
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError, match=f"Map not found: {missing}"):
        async with get_async_session() as session:
            await repository.update(session, Maps, missing, name="Nowhere")


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_delete_returns_prior_state(reset_shared_db_connections):
    user = await make_user()
    city = await make_map(user.id)

    async with get_async_session() as session:
        deleted = await repository.delete(session, Maps, city.id)

    assert deleted.id == city.id
    assert deleted.name == "City A"
    with pytest.raises(NotFoundError):
        async with get_async_session() as session:
            await repository.get_by_id(session, Maps, city.id)


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_delete_parent_with_children_is_refused(reset_shared_db_connections):
    user = await make_user()
    city = await make_map(user.id)

    with pytest.raises(ConstraintViolationError):
        async with get_async_session() as session:
            await repository.delete(session, Users, user.id)

    # Nothing was removed and the child still points at its parent
    async with get_async_session() as session:
        assert (await repository.get_by_id(session, Users, user.id)).id == user.id
        assert (await repository.get_by_id(session, Maps, city.id)).owner_id == user.id


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_delete_missing_row_is_not_found(reset_shared_db_connections):
    with pytest.raises(NotFoundError):
        async with get_async_session() as session:
            await repository.delete(session, Places, uuid.uuid4())


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_children_of_groups_by_parent(reset_shared_db_connections):
    user = await make_user()
    first = await make_map(user.id)
    second = await make_map(user.id)
    lonely = uuid.uuid4()

    async with get_async_session() as session:
        for name in ("North", "South"):
            await repository.create(
                session, Places, name=name, type="poi", latitude=1.0, longitude=2.0, map_id=first.id
            )
        grouped = await repository.children_of(
            session, Places, "map_id", [first.id, second.id, lonely]
        )

    assert sorted(p.name for p in grouped[first.id]) == ["North", "South"]
    assert grouped[second.id] == []
    assert grouped[lonely] == []


def test_parse_id_rejects_non_uuid_as_not_found():
    with pytest.raises(NotFoundError, match="Map not found: nope"):
        repository.parse_id(Maps, "nope")


def test_parse_parent_id_rejects_non_uuid_as_constraint_violation():
    with pytest.raises(ConstraintViolationError, match="does not exist"):
        repository.parse_parent_id(Places, "nope")


def test_parse_id_accepts_uuid_strings():
    value = uuid.uuid4()
    assert repository.parse_id(Maps, str(value)) == value
    assert repository.parse_id(Maps, value) is value


@pytest.mark.asyncio
@pytest.mark.requires_db
async def test_list_all_applies_loader_options(reset_shared_db_connections):
    user = await make_user()
    await make_map(user.id)

    async with get_async_session() as session:
        rows = await repository.list_all(session, Maps, selectinload(Maps.owner))

    # The relationship was loaded eagerly, so it is readable after the session closed
    assert [row.owner.email for row in rows] == ["ada@example.com"]
