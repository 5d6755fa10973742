"""Repository layer for database operations.

Repositories are the only code that touches shape records; they hand
domain shapes to the layers above via the mappers.
"""

from repositories.cube_repository import CubeRepository
from repositories.cylinder_repository import CylinderRepository
from repositories.mappers import CUBE_MAPPER, CYLINDER_MAPPER, ShapeMapper
from repositories.shape_repository import ShapeRepository
from repositories.utils import log_slow_query

__all__ = [
    "CUBE_MAPPER",
    "CYLINDER_MAPPER",
    "CubeRepository",
    "CylinderRepository",
    "ShapeMapper",
    "ShapeRepository",
    "log_slow_query",
]
