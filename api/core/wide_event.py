"""Request-scoped context for canonical log lines.

RequestTimingMiddleware creates one dict per request; repositories and
services add fields to it; the middleware emits it as a single
``request.completed`` log line when the response finishes.

Usage:
    from core.wide_event import set_wide_event_fields

    set_wide_event_fields(shape_type="cube", shape_id=str(cube.id))
"""

from contextvars import ContextVar
from typing import Any

_wide_event: ContextVar[dict[str, Any]] = ContextVar("wide_event")


def init_wide_event() -> dict[str, Any]:
    """Start a fresh event dict for the current async context."""
    event: dict[str, Any] = {}
    _wide_event.set(event)
    return event


def get_wide_event() -> dict[str, Any]:
    """Current event dict, or an empty dict outside a request."""
    try:
        return _wide_event.get()
    except LookupError:
        return {}


def set_wide_event_fields(**kwargs: Any) -> None:
    """Merge fields into the current event.

    Outside a request (CLI, tests without the fixture) there is no event and
    the call does nothing.
    """
    try:
        event = _wide_event.get()
    except LookupError:
        return
    event.update(kwargs)


def clear_wide_event() -> None:
    """Drop the current event once it has been emitted."""
    _wide_event.set({})
