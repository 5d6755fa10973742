"""Tests for application wiring: lifespan and error handlers."""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from domain.errors import (
    DimensionValidationError,
    InvalidArgumentError,
    ShapeAlreadyExistsError,
)
from main import (
    app,
    dimension_error_handler,
    invalid_argument_handler,
    lifespan,
    shape_conflict_handler,
)


@pytest.mark.unit
class TestErrorHandlers:
    async def test_dimension_error_is_422(self):
        request = MagicMock()
        exc = DimensionValidationError("Cube", "side_length", 0)

        response = await dimension_error_handler(request, exc)

        assert response.status_code == 422
        assert b"side_length" in response.body

    async def test_invalid_argument_is_400(self):
        response = await invalid_argument_handler(
            MagicMock(), InvalidArgumentError("shape")
        )

        assert response.status_code == 400

    async def test_conflict_is_409(self):
        exc = ShapeAlreadyExistsError("Cylinder", uuid.uuid4())

        response = await shape_conflict_handler(MagicMock(), exc)

        assert response.status_code == 409
        assert b"Please update this entity instead." in response.body


@pytest.mark.unit
class TestAppWiring:
    def test_registers_shape_routes(self):
        paths = {route.path for route in app.routes}

        assert {
            "/api/cubes",
            "/api/cubes/{cube_id}",
            "/api/cylinders",
            "/api/cylinders/{cylinder_id}",
            "/health",
            "/ready",
            "/health/detailed",
        } <= paths

    def test_docs_disabled_by_default(self):
        assert app.docs_url is None


@pytest.mark.integration
class TestLifespan:
    async def test_startup_initializes_state(self):
        test_app = FastAPI()

        async with lifespan(test_app):
            assert test_app.state.init_done is True
            assert test_app.state.init_error is None
            assert test_app.state.session_maker is not None

    async def test_startup_failure_records_error(self):
        test_app = FastAPI()

        with patch(
            "main.init_db", new_callable=AsyncMock, side_effect=RuntimeError("no db")
        ):
            with pytest.raises(RuntimeError, match="no db"):
                async with lifespan(test_app):
                    pass

        assert test_app.state.init_error == "no db"
        assert test_app.state.init_done is False

    async def test_shutdown_disposes_engine(self):
        test_app = FastAPI()

        with patch("main.dispose_engine", new_callable=AsyncMock) as mock_dispose:
            async with lifespan(test_app):
                pass

        mock_dispose.assert_awaited_once_with(test_app.state.engine)
