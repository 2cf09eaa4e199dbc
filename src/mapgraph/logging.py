"""
structlog setup for the Mapgraph API.

Every event carries the id of the HTTP request it belongs to and, for
GraphQL traffic, the operation being served. Values under sensitive keys
are masked before rendering.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "token",
        "api_key",
        "secret",
        "auth",
        "authorization",
        "access_token",
        "key",
        "session",
        "cookie",
        "credentials",
    }
)

REDACTED = "[REDACTED]"

# Request lines are logged by LoggingContextMiddleware already
_QUIET_LOGGERS = ("uvicorn.access",)


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    _ = logger, method_name
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    operation = operation_ctx.get()
    if operation:
        event_dict.setdefault("graphql_operation", operation)
    return event_dict


def redact_sensitive(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    _ = logger, method_name
    for key in event_dict:
        if key != "event" and is_sensitive(key):
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Render events for a terminal instead of as JSON lines.
        level: Log level name; defaults to DEBUG when ``debug`` is set, else INFO.
    """
    if level is None:
        log_level = logging.DEBUG if debug else logging.INFO
    else:
        log_level = logging.getLevelName(level.upper())

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            redact_sensitive,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def set_request_context(request_id: str | None = None, operation: str | None = None) -> None:
    """Bind the request id (generated when missing) and GraphQL operation."""
    if not request_id:
        request_id = uuid.uuid4().hex[:12]
    request_id_ctx.set(request_id)
    operation_ctx.set(operation)


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
