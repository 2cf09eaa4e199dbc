"""
Reusable seed data functions for database initialization.

Seeding is idempotent: the sample user is looked up by email and nothing is
written when it already exists.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Maps, Places, Routes, Users
from ..logging import get_logger
from ..passwords import hash_password

logger = get_logger(__name__)

SAMPLE_USER_EMAIL = "demo@mapgraph.dev"

SAMPLE_PLACES = [
    {"name": "Central Station", "type": "station", "latitude": 52.5251, "longitude": 13.3694},
    {"name": "Old Town Square", "type": "landmark", "latitude": 52.5163, "longitude": 13.3777},
]


async def ensure_sample_user(db: AsyncSession, *, password: str = "demo") -> tuple[UUID, bool]:
    """
    Ensure the sample user exists.

    Returns:
        The user's id and whether it was created by this call.
    """
    result = await db.execute(select(Users).where(Users.email == SAMPLE_USER_EMAIL))
    existing = result.scalar_one_or_none()
    if existing is not None:
        logger.info("Sample user already exists", user_id=str(existing.id))
        return existing.id, False

    user = Users(
        name="Demo User",
        email=SAMPLE_USER_EMAIL,
        password_hash=hash_password(password),
        role="user",
    )
    db.add(user)
    await db.flush()
    logger.info("Created sample user", user_id=str(user.id))
    return user.id, True


async def seed_sample_data(db: AsyncSession) -> UUID:
    """
    Seed a sample user owning one road map with two places and a route.

    Args:
        db: Database session (committed by the caller's context manager)

    Returns:
        UUID of the sample user
    """
    user_id, created = await ensure_sample_user(db)
    if not created:
        return user_id

    sample_map = Maps(name="City A", type="road", owner_id=user_id)
    db.add(sample_map)
    await db.flush()

    places = [Places(map_id=sample_map.id, **values) for values in SAMPLE_PLACES]
    db.add_all(places)
    await db.flush()

    db.add(
        Routes(
            name="Station to Old Town",
            origin_id=str(places[0].id),
            destination_id=str(places[1].id),
            distance=1.4,
            duration=18,
            map_id=sample_map.id,
        )
    )
    await db.flush()

    logger.info(
        "Seeded sample data",
        user_id=str(user_id),
        map_id=str(sample_map.id),
        places=len(places),
    )
    return user_id
