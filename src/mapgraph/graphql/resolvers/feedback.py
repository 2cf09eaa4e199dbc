"""Resolvers for favorites and comments.

Both point at a place or a route. The two optional id arguments are folded
into a single target reference before anything is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database import repository
from ...database.connection import get_async_session
from ...dbmodels import Comments, Favorites
from ...logging import get_logger
from ...targets import target_columns, target_from_ids

if TYPE_CHECKING:
    from ..types.feedback import Comment, Favorite

logger = get_logger(__name__)


def _target_columns(
    model: type[Favorites] | type[Comments],
    place_id: strawberry.ID | None,
    route_id: strawberry.ID | None,
) -> dict:
    target = target_from_ids(
        repository.entity_name(model),
        repository.parse_parent_id(model, place_id) if place_id is not None else None,
        repository.parse_parent_id(model, route_id) if route_id is not None else None,
    )
    return target_columns(target)


# Query resolvers
async def resolve_favorites(info: strawberry.Info) -> list[Favorite]:
    from ..types.feedback import Favorite

    async with get_async_session() as session:
        rows = await repository.list_all(session, Favorites)
    return [Favorite.from_model(row) for row in rows]


async def resolve_comments(info: strawberry.Info) -> list[Comment]:
    from ..types.feedback import Comment

    async with get_async_session() as session:
        rows = await repository.list_all(session, Comments)
    return [Comment.from_model(row) for row in rows]


# Favorite mutations
async def create_favorite(
    info: strawberry.Info,
    user_id: strawberry.ID,
    place_id: strawberry.ID | None = None,
    route_id: strawberry.ID | None = None,
) -> Favorite:
    from ..types.feedback import Favorite

    columns = _target_columns(Favorites, place_id, route_id)
    async with get_async_session() as session:
        row = await repository.create(
            session,
            Favorites,
            user_id=repository.parse_parent_id(Favorites, user_id),
            **columns,
        )

    logger.info(
        "Favorite created",
        favorite_id=str(row.id),
        user_id=str(row.user_id),
        place_id=str(row.place_id) if row.place_id else None,
        route_id=str(row.route_id) if row.route_id else None,
    )
    return Favorite.from_model(row)


async def delete_favorite(info: strawberry.Info, id: strawberry.ID) -> Favorite:
    from ..types.feedback import Favorite

    favorite_id = repository.parse_id(Favorites, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Favorites, favorite_id)

    logger.info("Favorite deleted", favorite_id=str(favorite_id))
    return Favorite.from_model(row)


# Comment mutations
async def create_comment(
    info: strawberry.Info,
    user_id: strawberry.ID,
    text: str,
    rating: int,
    place_id: strawberry.ID | None = None,
    route_id: strawberry.ID | None = None,
) -> Comment:
    from ..types.feedback import Comment

    columns = _target_columns(Comments, place_id, route_id)
    async with get_async_session() as session:
        row = await repository.create(
            session,
            Comments,
            user_id=repository.parse_parent_id(Comments, user_id),
            text=text,
            rating=rating,
            **columns,
        )

    logger.info("Comment created", comment_id=str(row.id), user_id=str(row.user_id), rating=rating)
    return Comment.from_model(row)


async def update_comment(
    info: strawberry.Info, id: strawberry.ID, text: str | None = None, rating: int | None = None
) -> Comment:
    from ..types.feedback import Comment

    comment_id = repository.parse_id(Comments, id)
    async with get_async_session() as session:
        row, updated_fields = await repository.update(
            session, Comments, comment_id, text=text, rating=rating
        )

    logger.info("Comment updated", comment_id=str(comment_id), updated_fields=updated_fields)
    return Comment.from_model(row)


async def delete_comment(info: strawberry.Info, id: strawberry.ID) -> Comment:
    from ..types.feedback import Comment

    comment_id = repository.parse_id(Comments, id)
    async with get_async_session() as session:
        row = await repository.delete(session, Comments, comment_id)

    logger.info("Comment deleted", comment_id=str(comment_id))
    return Comment.from_model(row)
