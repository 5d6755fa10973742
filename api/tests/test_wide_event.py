"""Unit tests for core.wide_event module.

Tests the ContextVar-based wide event lifecycle: init, set, get, clear,
and safe no-op behavior outside request context.
"""

import contextvars

import pytest

from core.wide_event import (
    clear_wide_event,
    get_wide_event,
    init_wide_event,
    set_wide_event_fields,
)


def _init_with_request_context() -> dict:
    """Mimic what RequestTimingMiddleware does: init + populate base fields."""
    event = init_wide_event()
    event["service_name"] = "test-api"
    event["request_id"] = "test-req-1"
    return event


@pytest.mark.unit
class TestWideEventLifecycle:
    """Test the full init → set → get → clear lifecycle."""

    def test_init_returns_empty_dict(self):
        event = init_wide_event()
        assert event == {}

    def test_set_and_get_fields(self):
        _init_with_request_context()
        set_wide_event_fields(shape_type="cube", shape_id="c1")
        event = get_wide_event()
        assert event["shape_type"] == "cube"
        assert event["shape_id"] == "c1"
        assert event["request_id"] == "test-req-1"

    def test_set_fields_accumulates(self):
        _init_with_request_context()
        set_wide_event_fields(a=1)
        set_wide_event_fields(b=2)
        event = get_wide_event()
        assert event["a"] == 1
        assert event["b"] == 2

    def test_set_fields_overwrites_existing_key(self):
        _init_with_request_context()
        set_wide_event_fields(key="old")
        set_wide_event_fields(key="new")
        assert get_wide_event()["key"] == "new"

    def test_set_fields_on_bare_init(self):
        init_wide_event()
        set_wide_event_fields(shape_type="cylinder")
        assert get_wide_event() == {"shape_type": "cylinder"}

    def test_clear_resets_to_empty(self):
        _init_with_request_context()
        set_wide_event_fields(shape_id="c1")
        clear_wide_event()
        assert get_wide_event() == {}

    def test_direct_dict_mutation_reflected_in_get(self):
        """Middleware writes directly to the dict returned by init_wide_event."""
        event = init_wide_event()
        event["http_method"] = "POST"
        assert get_wide_event()["http_method"] == "POST"

    def test_init_then_set_works_after_clear(self):
        """Re-init after clear starts a clean event (mimics next request)."""
        _init_with_request_context()
        set_wide_event_fields(req=1)
        clear_wide_event()

        _init_with_request_context()
        set_wide_event_fields(req=2)
        assert get_wide_event()["req"] == 2


@pytest.mark.unit
class TestWideEventOutsideRequest:
    """With no event in the context, reads are empty and writes are dropped."""

    def test_get_returns_empty_dict(self):
        result = contextvars.Context().run(get_wide_event)
        assert result == {}

    def test_set_is_noop(self):
        def _run() -> dict:
            set_wide_event_fields(should_not="crash")
            return get_wide_event()

        assert contextvars.Context().run(_run) == {}
