"""Service layer.

Layer hierarchy:
    Routes (HTTP) -> Services -> Repositories (Database) -> Mappers

Services take and return domain shapes, never ORM records or pydantic
schemas; routes do the schema conversion.
"""

from services.cube_service import CubeService
from services.cylinder_service import CylinderService
from services.shape_service import ShapeService

__all__ = ["CubeService", "CylinderService", "ShapeService"]
