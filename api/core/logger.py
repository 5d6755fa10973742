"""Centralized logging configuration using structlog.

- JSON output for production (LOG_FORMAT=json)
- Colored console output for local development (default)
- OpenTelemetry trace/span ID injection when telemetry is enabled
- stdlib loggers (uvicorn, sqlalchemy) rendered through the same pipeline

Usage:
    from core import get_logger
    logger = get_logger(__name__)
    logger.info("shape.inserted", shape_type="cube", shape_id="...")
"""

import logging
import os
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars
from structlog.types import EventDict, Processor

_TELEMETRY_ENABLED = bool(os.getenv("APPLICATIONINSIGHTS_CONNECTION_STRING"))
_SERVICE_NAME = os.getenv("SERVICE_NAME", "geometry-api")
_ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

__all__ = [
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
]


def _add_open_telemetry_spans(
    _logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add OpenTelemetry trace and span IDs to log entries for correlation."""
    if not _TELEMETRY_ENABLED:
        return event_dict

    from opentelemetry import trace

    span = trace.get_current_span()
    if span and span.is_recording():
        ctx = span.get_span_context()
        if ctx.is_valid:
            event_dict["trace_id"] = format(ctx.trace_id, "032x")
            event_dict["span_id"] = format(ctx.span_id, "016x")

    return event_dict


def _add_service_context(
    _logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp every entry with the service name and deployment environment."""
    event_dict.setdefault("service", _SERVICE_NAME)
    event_dict.setdefault("environment", _ENVIRONMENT)
    return event_dict


def _get_log_level() -> int:
    """Get log level from environment, defaulting to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _is_json_format() -> bool:
    """JSON when LOG_FORMAT=json, or by default when telemetry is enabled."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return True
    if log_format == "console":
        return False
    return _TELEMETRY_ENABLED


def configure_logging(sql_echo: bool = False) -> None:
    """Configure structlog and stdlib logging. Call once at application startup.

    With sql_echo, SQLAlchemy statement logs go through the same pipeline
    instead of the engine's own echo handler.
    """
    log_level = _get_log_level()
    use_json = _is_json_format()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        _add_open_telemetry_spans,
        _add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True, exception_formatter=structlog.dev.plain_traceback
        )

    structlog.configure(
        processors=shared_processors
        + [
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Third-party logs (uvicorn, sqlalchemy) get the same formatting
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # Quiet noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        logger = get_logger(__name__)
        logger.info("shape.deleted", shape_type="cylinder", shape_id="...")
    """
    return structlog.stdlib.get_logger(name)
