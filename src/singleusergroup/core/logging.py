"""Structured logging for group backends.

Log entries are key-value events rendered by structlog: human-readable in
development, one JSON object per line elsewhere. Values bound with
``structlog.contextvars`` (the registry binds the group UUID or the query
and actor it is serving) are merged into every entry logged while they are
bound.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from singleusergroup.core.config import Settings, get_settings

DEFAULT_LOGGER_NAME = "singleusergroup"


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Record the name the logger was created with.

    ``structlog.stdlib.add_logger_name`` needs a stdlib logger; printed
    loggers carry their name in the bound context instead.
    """
    name = event_dict.pop("logger_name", None) or getattr(logger, "name", None)
    event_dict["logger"] = name or DEFAULT_LOGGER_NAME
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' field to 'message' for compatibility."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def _renderers(settings: Settings) -> list[Processor]:
    if settings.is_development or settings.log_format == "console":
        return [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the process.

    Call once at startup, before backends are registered. Loggers obtained
    earlier through ``get_logger`` pick up the configuration on first use.

    Args:
        settings: Settings to read the level and format from. Loaded from
            the environment when omitted.
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level)
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        rename_message_field,
    ]

    structlog.configure(
        processors=processors + _renderers(settings),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=settings.is_production,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # Engine echo is controlled by db_echo, not by the log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to ``name``.

    Args:
        name: Logger name, usually the calling module's ``__name__``.
    """
    return structlog.get_logger(logger_name=name or DEFAULT_LOGGER_NAME)
