"""Structured logging for authcore.

structlog is configured once per process by ``configure_logging``. Every
entry carries a correlation id (bound per message by the transport or
generated on the fly) and has credential material masked before rendering.
"""

import logging
import sys
import uuid
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from authcore.core.config import Settings

SENSITIVE_KEYS = frozenset({"password", "password_hash", "token", "secret_key"})
REDACTED = "***"


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Generate a correlation id when none is bound in context."""
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = f"cid_{uuid.uuid4().hex[:12]}"
    return event_dict


def add_logger_name(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["logger"] = getattr(logger, "name", "authcore")
    return event_dict


def redact_credentials(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask values of keys that may hold passwords, hashes, tokens or secrets.

    Args:
        logger: Wrapped logger (unused).
        method_name: Log method name (unused).
        event_dict: Entry being processed.

    Returns:
        EventDict: The entry with sensitive values replaced.
    """
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def rename_message_field(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger.

    Development (or ``log_format="console"``) renders human-readable
    lines; anything else renders one JSON object per line.
    """
    level = getattr(logging, settings.log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        add_correlation_id,
        redact_credentials,
    ]

    if settings.is_development or settings.log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            rename_message_field,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=not (settings.is_development or settings.is_testing),
    )

    # sqlalchemy and aiosqlite log through stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named ``name`` (default ``authcore``)."""
    return structlog.get_logger(name or "authcore")


class LoggingContext:
    """Bind keys into the structlog context for the duration of a block.

    Example:
        with LoggingContext(correlation_id="cid_abc123", pattern="auth.login.user"):
            logger.info("Message handled")
    """

    def __init__(self, **values: str) -> None:
        self.values = values

    def __enter__(self) -> "LoggingContext":
        structlog.contextvars.bind_contextvars(**self.values)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.values)
