"""
Error types raised by the resolver layer.

Every error propagates unchanged into the GraphQL response ``errors`` list;
nothing here is retried or recovered locally.
"""

from __future__ import annotations


class MapgraphError(Exception):
    """Base class for application errors."""

    pass


class NotFoundError(MapgraphError):
    """Raised when an update or delete references an id that does not exist."""

    def __init__(self, entity: str, id: object):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} not found: {id}")


class ConstraintViolationError(MapgraphError):
    """Raised when the store rejects a write on referential or uniqueness grounds."""

    def __init__(self, entity: str, detail: str):
        self.entity = entity
        self.detail = detail
        super().__init__(f"{entity} constraint violation: {detail}")


class MalformedScalarError(MapgraphError, ValueError):
    """Raised when a DateTime or Json input cannot be decoded."""

    def __init__(self, scalar: str, value: object, reason: str | None = None):
        self.scalar = scalar
        self.value = value
        message = f"Invalid {scalar} value: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
