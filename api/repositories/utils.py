"""Repository utility functions for common database operations."""

import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from core.logger import get_logger
from core.wide_event import set_wide_event_fields

logger = get_logger(__name__)

# Threshold for logging slow queries (milliseconds)
SLOW_QUERY_THRESHOLD_MS = 500

P = ParamSpec("P")
R = TypeVar("R")


def log_slow_query(
    operation_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator to log slow repository operations and errors.

    Slow calls and failures are recorded on the request's wide event and
    logged; exceptions are re-raised unchanged.

    Usage:
        @log_slow_query("cube.read_by_id")
        async def read_by_id(self, shape_id: UUID) -> Cube | None:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
                set_wide_event_fields(
                    db_query_error=True,
                    db_operation=operation_name,
                    db_duration_ms=duration_ms,
                    db_error=str(e),
                    db_error_type=type(e).__name__,
                )
                logger.debug(
                    "db.operation.failed",
                    db_operation=operation_name,
                    db_error_type=type(e).__name__,
                )
                raise

            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            if duration_ms > SLOW_QUERY_THRESHOLD_MS:
                set_wide_event_fields(
                    db_slow_query=True,
                    db_operation=operation_name,
                    db_duration_ms=duration_ms,
                )
                logger.warning(
                    "db.query.slow",
                    db_operation=operation_name,
                    db_duration_ms=duration_ms,
                )
            return result

        return wrapper

    return decorator
