from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

from strawberry.dataloader import DataLoader

from ..database import repository
from ..database.connection import get_async_session
from ..dbmodels import Base, Maps, Places, Routes, Users


def load_by_id(model: type[Base]) -> Callable[[list[UUID]], Awaitable[list[Any]]]:
    """Batch load rows of ``model`` by primary key."""

    async def load(keys: list[UUID]) -> list[Any]:
        async with get_async_session() as session:
            rows = await repository.by_ids(session, model, keys)
        return [rows.get(key) for key in keys]

    return load


def load_children(
    model: type[Base], column: str
) -> Callable[[list[UUID]], Awaitable[list[list[Any]]]]:
    """Batch load the rows of ``model`` grouped by the parent id in ``column``."""

    async def load(keys: list[UUID]) -> list[list[Any]]:
        async with get_async_session() as session:
            grouped = await repository.children_of(session, model, column, keys)
        return [grouped.get(key, []) for key in keys]

    return load


class Loaders:
    """Per-request DataLoaders for relationship fields."""

    def __init__(self):
        self.users = DataLoader(load_fn=load_by_id(Users))
        self.maps = DataLoader(load_fn=load_by_id(Maps))
        self.places = DataLoader(load_fn=load_by_id(Places))
        self.routes = DataLoader(load_fn=load_by_id(Routes))
        self._children: dict[tuple[type[Base], str], DataLoader] = {}

    def children(self, model: type[Base], column: str) -> DataLoader:
        """Loader for the ``model`` rows whose ``column`` references the key."""
        key = (model, column)
        if key not in self._children:
            self._children[key] = DataLoader(load_fn=load_children(model, column))
        return self._children[key]
