"""Custom GraphQL scalars.

Provides custom scalar types for:
- DateTime: ISO-8601 string on the wire, timezone-aware ``datetime`` inside
- Json: JSON-encoded string on the wire, nested Python value inside
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any, NewType

import strawberry

from ..errors import MalformedScalarError


def serialize_datetime(value: datetime) -> str:
    # SQLite hands back naive values; everything is stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()


def parse_datetime(value: Any) -> datetime:
    if not isinstance(value, str):
        raise MalformedScalarError("DateTime", value, "expected an ISO-8601 string")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise MalformedScalarError("DateTime", value, str(e)) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def serialize_json(value: Any) -> str:
    return json.dumps(value)


def parse_json(value: Any) -> Any:
    if not isinstance(value, str):
        raise MalformedScalarError("Json", value, "expected a JSON-encoded string")
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise MalformedScalarError("Json", value, e.msg) from e


# Replaces strawberry's built-in datetime scalar through ``scalar_overrides``
DateTime = strawberry.scalar(
    datetime,
    name="DateTime",
    description="A valid date-time value (ISO-8601 string)",
    serialize=serialize_datetime,
    parse_value=parse_datetime,
)

Json = strawberry.scalar(
    NewType("Json", object),
    name="Json",
    description="A JSON value, transported as a JSON-encoded string",
    serialize=serialize_json,
    parse_value=parse_json,
)

__all__ = ["DateTime", "Json", "parse_datetime", "parse_json", "serialize_datetime", "serialize_json"]
