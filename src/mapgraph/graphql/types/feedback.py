"""
Favorite and comment GraphQL type definitions
"""

from uuid import UUID

import strawberry

from ...dbmodels import Comments, Favorites
from .map import Place, Route, load_place, load_route
from .user import User, load_user


@strawberry.type
class Favorite:
    """A user's bookmark of one place or one route."""

    id: strawberry.ID
    user_id: strawberry.Private[UUID]
    place_id: strawberry.Private[UUID | None]
    route_id: strawberry.Private[UUID | None]

    @classmethod
    def from_model(cls, row: Favorites) -> "Favorite":
        return cls(
            id=strawberry.ID(str(row.id)),
            user_id=row.user_id,
            place_id=row.place_id,
            route_id=row.route_id,
        )

    @strawberry.field
    async def user(self, info: strawberry.Info) -> User:
        return await load_user(info, self.user_id)

    @strawberry.field
    async def place(self, info: strawberry.Info) -> Place | None:
        return await load_place(info, self.place_id)

    @strawberry.field
    async def route(self, info: strawberry.Info) -> Route | None:
        return await load_route(info, self.route_id)


@strawberry.type
class Comment:
    id: strawberry.ID
    text: str
    rating: int
    user_id: strawberry.Private[UUID]
    place_id: strawberry.Private[UUID | None]
    route_id: strawberry.Private[UUID | None]

    @classmethod
    def from_model(cls, row: Comments) -> "Comment":
        return cls(
            id=strawberry.ID(str(row.id)),
            text=row.text,
            rating=row.rating,
            user_id=row.user_id,
            place_id=row.place_id,
            route_id=row.route_id,
        )

    @strawberry.field
    async def user(self, info: strawberry.Info) -> User:
        return await load_user(info, self.user_id)

    @strawberry.field
    async def place(self, info: strawberry.Info) -> Place | None:
        return await load_place(info, self.place_id)

    @strawberry.field
    async def route(self, info: strawberry.Info) -> Route | None:
        return await load_route(info, self.route_id)
