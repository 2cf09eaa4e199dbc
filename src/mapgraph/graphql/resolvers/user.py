"""Resolvers for users and the records that hang off a user."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

import strawberry

from ...database import repository
from ...database.connection import get_async_session
from ...dbmodels import MapStyles, NavigationHistory, Subscriptions, Users
from ...logging import get_logger
from ...passwords import hash_password

if TYPE_CHECKING:
    from ..types.user import MapStyle as MapStyleType
    from ..types.user import NavigationHistory as NavigationHistoryType
    from ..types.user import Subscription as SubscriptionType
    from ..types.user import User as UserType

logger = get_logger(__name__)


# Query resolvers
async def resolve_users(info: strawberry.Info) -> list[UserType]:
    from ..types.user import User

    async with get_async_session() as session:
        rows = await repository.list_all(session, Users)
    return [User.from_model(row) for row in rows]


async def resolve_subscriptions(info: strawberry.Info) -> list[SubscriptionType]:
    from ..types.user import Subscription

    async with get_async_session() as session:
        rows = await repository.list_all(session, Subscriptions)
    return [Subscription.from_model(row) for row in rows]


async def resolve_navigation_history(info: strawberry.Info) -> list[NavigationHistoryType]:
    from ..types.user import NavigationHistory as NavigationHistoryType

    async with get_async_session() as session:
        rows = await repository.list_all(session, NavigationHistory)
    return [NavigationHistoryType.from_model(row) for row in rows]


async def resolve_map_styles(info: strawberry.Info) -> list[MapStyleType]:
    from ..types.user import MapStyle

    async with get_async_session() as session:
        rows = await repository.list_all(session, MapStyles)
    return [MapStyle.from_model(row) for row in rows]


# User mutations
async def create_user(info: strawberry.Info, name: str, email: str, password: str) -> UserType:
    """
    Create a new user.

    New accounts always get the "user" role; the password is stored hashed.
    """
    from ..types.user import User

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Users,
            name=name,
            email=email,
            password_hash=hash_password(password),
            role="user",
        )

    logger.info("User created", user_id=str(row.id))
    return User.from_model(row)


async def update_user(
    info: strawberry.Info,
    id: strawberry.ID,
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> UserType:
    from ..types.user import User

    user_id = repository.parse_id(Users, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(
            session,
            Users,
            user_id,
            name=name,
            email=email,
            password_hash=hash_password(password) if password is not None else None,
        )

    logger.info("User updated", user_id=str(user_id), updated_fields=updated_fields)
    return User.from_model(row)


async def delete_user(info: strawberry.Info, id: strawberry.ID) -> UserType:
    from ..types.user import User

    user_id = repository.parse_id(Users, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Users, user_id)

    logger.info("User deleted", user_id=str(user_id))
    return User.from_model(row)


# Subscription mutations
async def create_subscription(
    info: strawberry.Info, user_id: strawberry.ID, plan_type: str, expiration: datetime
) -> SubscriptionType:
    from ..types.user import Subscription

    async with get_async_session() as session:
        row = await repository.create(
            session,
            Subscriptions,
            user_id=repository.parse_parent_id(Subscriptions, user_id),
            plan_type=plan_type,
            expiration=expiration,
        )

    logger.info(
        "Subscription created",
        subscription_id=str(row.id),
        user_id=str(row.user_id),
        plan_type=plan_type,
    )
    return Subscription.from_model(row)


async def delete_subscription(info: strawberry.Info, id: strawberry.ID) -> SubscriptionType:
    from ..types.user import Subscription

    subscription_id = repository.parse_id(Subscriptions, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Subscriptions, subscription_id)

    logger.info("Subscription deleted", subscription_id=str(subscription_id))
    return Subscription.from_model(row)


# Navigation history mutations
async def create_navigation_history(
    info: strawberry.Info, user_id: strawberry.ID, action: str, details: str | None = None
) -> NavigationHistoryType:
    from ..types.user import NavigationHistory as NavigationHistoryType

    async with get_async_session() as session:
        row = await repository.create(
            session,
            NavigationHistory,
            user_id=repository.parse_parent_id(NavigationHistory, user_id),
            action=action,
            details=details,
        )

    logger.info("Navigation history recorded", history_id=str(row.id), action=action)
    return NavigationHistoryType.from_model(row)


async def delete_navigation_history(
    info: strawberry.Info, id: strawberry.ID
) -> NavigationHistoryType:
    from ..types.user import NavigationHistory as NavigationHistoryType

    history_id = repository.parse_id(NavigationHistory, id)
    async with get_async_session() as session:
        row = await repository.delete(session, NavigationHistory, history_id)

    logger.info("Navigation history deleted", history_id=str(history_id))
    return NavigationHistoryType.from_model(row)


# Map style mutations
async def create_map_style(
    info: strawberry.Info, user_id: strawberry.ID, name: str, style: Any, is_default: bool
) -> MapStyleType:
    from ..types.user import MapStyle

    async with get_async_session() as session:
        row = await repository.create(
            session,
            MapStyles,
            user_id=repository.parse_parent_id(MapStyles, user_id),
            name=name,
            style=style,
            is_default=is_default,
        )

    logger.info("Map style created", style_id=str(row.id), name=name, is_default=is_default)
    return MapStyle.from_model(row)


async def delete_map_style(info: strawberry.Info, id: strawberry.ID) -> MapStyleType:
    from ..types.user import MapStyle

    style_id = repository.parse_id(MapStyles, id)
    async with get_async_session() as session:
        row = await repository.delete(session, MapStyles, style_id)

    logger.info("Map style deleted", style_id=str(style_id))
    return MapStyle.from_model(row)
