"""
User-owned GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

import strawberry

from ...dbmodels import Comments, Favorites, Maps, MapStyles, NavigationHistory as HistoryRow
from ...dbmodels import Subscriptions, Users
from ..context import get_loaders
from ..scalars import Json

if TYPE_CHECKING:
    from .feedback import Comment, Favorite  # noqa: F401
    from .map import Map  # noqa: F401


async def load_user(info: strawberry.Info, user_id: UUID) -> "User":
    row = await get_loaders(info).users.load(user_id)
    if row is None:
        raise RuntimeError("User not found")
    return User.from_model(row)


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    role: str

    @classmethod
    def from_model(cls, row: Users) -> "User":
        return cls(id=strawberry.ID(str(row.id)), name=row.name, email=row.email, role=row.role)

    @property
    def uuid(self) -> UUID:
        return UUID(self.id)

    @strawberry.field
    async def maps(
        self, info: strawberry.Info
    ) -> list[Annotated["Map", strawberry.lazy(".map")]] | None:
        """Maps owned by this user."""
        from .map import Map

        rows = await get_loaders(info).children(Maps, "owner_id").load(self.uuid)
        return [Map.from_model(row) for row in rows]

    @strawberry.field
    async def subscriptions(self, info: strawberry.Info) -> list["Subscription"] | None:
        rows = await get_loaders(info).children(Subscriptions, "user_id").load(self.uuid)
        return [Subscription.from_model(row) for row in rows]

    @strawberry.field
    async def favorites(
        self, info: strawberry.Info
    ) -> list[Annotated["Favorite", strawberry.lazy(".feedback")]] | None:
        from .feedback import Favorite

        rows = await get_loaders(info).children(Favorites, "user_id").load(self.uuid)
        return [Favorite.from_model(row) for row in rows]

    @strawberry.field
    async def history(self, info: strawberry.Info) -> list["NavigationHistory"] | None:
        rows = await get_loaders(info).children(HistoryRow, "user_id").load(self.uuid)
        return [NavigationHistory.from_model(row) for row in rows]

    @strawberry.field
    async def comments(
        self, info: strawberry.Info
    ) -> list[Annotated["Comment", strawberry.lazy(".feedback")]] | None:
        from .feedback import Comment

        rows = await get_loaders(info).children(Comments, "user_id").load(self.uuid)
        return [Comment.from_model(row) for row in rows]

    @strawberry.field
    async def styles(self, info: strawberry.Info) -> list["MapStyle"] | None:
        rows = await get_loaders(info).children(MapStyles, "user_id").load(self.uuid)
        return [MapStyle.from_model(row) for row in rows]


@strawberry.type
class Subscription:
    """Billing plan subscription of a user."""

    id: strawberry.ID
    plan_type: str
    expiration: datetime
    user_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: Subscriptions) -> "Subscription":
        return cls(
            id=strawberry.ID(str(row.id)),
            plan_type=row.plan_type,
            expiration=row.expiration,
            user_id=row.user_id,
        )

    @strawberry.field
    async def user(self, info: strawberry.Info) -> "User":
        return await load_user(info, self.user_id)


@strawberry.type
class NavigationHistory:
    id: strawberry.ID
    timestamp: datetime
    action: str
    details: str | None
    user_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: HistoryRow) -> "NavigationHistory":
        return cls(
            id=strawberry.ID(str(row.id)),
            timestamp=row.timestamp,
            action=row.action,
            details=row.details,
            user_id=row.user_id,
        )

    @strawberry.field
    async def user(self, info: strawberry.Info) -> "User":
        return await load_user(info, self.user_id)


@strawberry.type
class MapStyle:
    id: strawberry.ID
    name: str
    style: Json
    is_default: bool
    created_at: datetime
    updated_at: datetime
    user_id: strawberry.Private[UUID]

    @classmethod
    def from_model(cls, row: MapStyles) -> "MapStyle":
        return cls(
            id=strawberry.ID(str(row.id)),
            name=row.name,
            style=row.style,
            is_default=row.is_default,
            created_at=row.created_at,
            updated_at=row.updated_at,
            user_id=row.user_id,
        )

    @strawberry.field
    async def user(self, info: strawberry.Info) -> "User":
        return await load_user(info, self.user_id)
