"""
structlog setup shared by the API server and the CLIs.

Request-scoped values (request id, GraphQL operation name) are bound with
``structlog.contextvars`` so every event logged while a request is being
served carries them, including events from resolvers and the database layer.
"""

import base64
import logging
import secrets
import sys
import time

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars

_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING,
           "error": logging.ERROR}


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Console rendering in debug mode, one JSON object per line otherwise.
    ``log_level`` wins over ``debug`` when both are given; unknown names fall
    back to INFO.
    """
    if log_level:
        level = _LEVELS.get(log_level.lower(), logging.INFO)
    else:
        level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(level=level, stream=sys.stdout, format="%(message)s", force=True)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
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


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a 14-character URL-safe id: microsecond timestamp plus two random bytes."""
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Bind the request id (generated when missing) and operation name for this request.

    Returns the request id in effect.
    """
    request_id = request_id or generate_request_id()
    bind_contextvars(request_id=request_id)
    if graphql_operation is not None:
        bind_contextvars(graphql_operation=graphql_operation)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")
