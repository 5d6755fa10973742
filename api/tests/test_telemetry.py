"""Unit tests for core.telemetry module.

Tests decorator pass-through when telemetry is disabled, span handling
when it is enabled, and the request timing middleware.
"""

from unittest.mock import MagicMock, patch

import pytest

from core.telemetry import instrument_sqlalchemy_engine, track_operation


@pytest.mark.unit
class TestTrackOperationDisabled:
    """track_operation should be a transparent pass-through when telemetry is off."""

    async def test_async_passthrough(self):
        @track_operation("test_op")
        async def my_func(x: int, y: int) -> int:
            return x + y

        result = await my_func(3, 4)
        assert result == 7

    async def test_async_exception_propagates(self):
        @track_operation("test_op")
        async def my_func():
            raise RuntimeError("async op failed")

        with pytest.raises(RuntimeError, match="async op failed"):
            await my_func()

    def test_rejects_sync_function(self):
        with pytest.raises(TypeError, match="async"):

            @track_operation("test_op")
            def my_func():
                return 1


@pytest.mark.unit
class TestTrackOperationEnabled:
    """With a tracer, every call runs inside a span."""

    async def test_records_success(self):
        mock_tracer = MagicMock()
        span = mock_tracer.start_as_current_span.return_value.__enter__.return_value

        with (
            patch("core.telemetry.TELEMETRY_ENABLED", True),
            patch("core.telemetry.tracer", mock_tracer),
        ):

            @track_operation("shape.insert")
            async def my_func():
                return "ok"

            assert await my_func() == "ok"

        mock_tracer.start_as_current_span.assert_called_once_with(
            "shape.insert", attributes={"operation.name": "shape.insert"}
        )
        span.set_attribute.assert_any_call("operation.success", True)

    async def test_records_failure_and_reraises(self):
        mock_tracer = MagicMock()
        span = mock_tracer.start_as_current_span.return_value.__enter__.return_value

        with (
            patch("core.telemetry.TELEMETRY_ENABLED", True),
            patch("core.telemetry.tracer", mock_tracer),
            patch("core.telemetry.Status"),
            patch("core.telemetry.StatusCode"),
        ):

            @track_operation("shape.delete")
            async def my_func():
                raise ValueError("nope")

            with pytest.raises(ValueError, match="nope"):
                await my_func()

        span.set_attribute.assert_any_call("operation.success", False)
        span.record_exception.assert_called_once()


@pytest.mark.unit
class TestInstrumentSqlalchemyEngine:
    def test_no_op_when_disabled(self):
        engine = MagicMock()
        instrument_sqlalchemy_engine(engine)
        assert not engine.method_calls


@pytest.mark.unit
class TestDecoratorPreservesFunctionMetadata:
    """Decorators should preserve __name__ and __doc__ via functools.wraps."""

    def test_track_operation_preserves_name(self):
        @track_operation("op")
        async def my_async_function():
            """Async docstring."""

        assert my_async_function.__name__ == "my_async_function"
        assert my_async_function.__doc__ == "Async docstring."


@pytest.mark.integration
class TestRequestTimingMiddleware:
    async def test_adds_timing_headers(self, client):
        response = await client.get("/health")

        assert "x-request-id" in response.headers
        assert float(response.headers["x-request-duration-ms"]) >= 0

    async def test_request_ids_differ(self, client):
        first = await client.get("/health")
        second = await client.get("/health")

        assert first.headers["x-request-id"] != second.headers["x-request-id"]

    async def test_error_responses_are_logged(self, client):
        with patch("core.telemetry.logger") as mock_logger:
            await client.get("/does-not-exist")

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("request.completed",)
        assert kwargs["http_status_code"] == 404
        assert kwargs["outcome"] == "error"

    async def test_fast_success_logged_at_debug(self, client):
        with patch("core.telemetry.logger") as mock_logger:
            await client.get("/health")

        mock_logger.info.assert_not_called()
        mock_logger.debug.assert_called_once()
