"""
Helpers for reading per-request objects out of the GraphQL context.

Over HTTP the context lives for one request. Over a WebSocket it lives for
the whole connection, so loaders are replaced for every operation and for
every subscription result; a cached row must never outlive the result it
was loaded for.
"""

from __future__ import annotations

from typing import Any

import strawberry
from strawberry.extensions import SchemaExtension

from ..broadcast import Broadcast
from .loaders import Loaders


def build_context(broadcast: Broadcast) -> dict[str, Any]:
    return {"broadcast": broadcast, "loaders": Loaders()}


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]


def refresh_loaders(info: strawberry.Info) -> Loaders:
    """Swap in empty loaders before resolving the next subscription result."""
    loaders = Loaders()
    info.context["loaders"] = loaders
    return loaders


def get_broadcast(info: strawberry.Info) -> Broadcast:
    return info.context["broadcast"]


class LoadersExtension(SchemaExtension):
    """Start every operation with empty loaders."""

    def on_operation(self):
        context = self.execution_context.context
        if isinstance(context, dict):
            context["loaders"] = Loaders()
        yield
