"""Pydantic schemas for API request/response validation.

Request dimensions are strict ints (no bool or float coercion) capped at the
storage limit; the positive-dimension rule is enforced by the domain shapes
and surfaces as a 422 through the app's error handlers.
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.shapes import MAX_DIMENSION, Cube, Cylinder

Dimension = Annotated[int, Field(strict=True, le=MAX_DIMENSION)]

# =============================================================================
# Cube
# =============================================================================


class CreateCubeRequest(BaseModel):
    """Request payload for POST /api/cubes."""

    side_length: Dimension = Field(description="Must be greater than 0.", examples=[5])


class UpdateCubeRequest(BaseModel):
    """Request payload for PUT /api/cubes/{id}."""

    side_length: Dimension = Field(description="Must be greater than 0.", examples=[10])


class CubeResponse(BaseModel):
    """A cube as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    side_length: int

    @classmethod
    def from_domain(cls, cube: Cube) -> "CubeResponse":
        return cls(id=cube.id, side_length=cube.side_length)


# =============================================================================
# Cylinder
# =============================================================================


class CreateCylinderRequest(BaseModel):
    """Request payload for POST /api/cylinders."""

    radius: Dimension = Field(description="Must be greater than 0.", examples=[5])
    height: Dimension = Field(description="Must be greater than 0.", examples=[10])


class UpdateCylinderRequest(BaseModel):
    """Request payload for PUT /api/cylinders/{id}."""

    radius: Dimension = Field(description="Must be greater than 0.", examples=[15])
    height: Dimension = Field(description="Must be greater than 0.", examples=[20])


class CylinderResponse(BaseModel):
    """A cylinder as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    radius: int
    height: int

    @classmethod
    def from_domain(cls, cylinder: Cylinder) -> "CylinderResponse":
        return cls(id=cylinder.id, radius=cylinder.radius, height=cylinder.height)


# =============================================================================
# Errors & health
# =============================================================================


class ErrorResponse(BaseModel):
    """Body of every non-validation error response."""

    detail: str


class HealthResponse(BaseModel):
    """Liveness/readiness response."""

    status: str
    service: str


class PoolStatusResponse(BaseModel):
    """Connection pool metrics."""

    pool_size: int
    checked_out: int
    overflow: int
    checked_in: int


class DetailedHealthResponse(BaseModel):
    """Detailed health check with component status."""

    status: str
    service: str
    database: bool
    pool: PoolStatusResponse | None = None
