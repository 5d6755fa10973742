"""Domain model for geometric shapes.

    from domain import Cube, Cylinder
"""

from domain.errors import (
    DimensionValidationError,
    GeometryError,
    InvalidArgumentError,
    RepositoryNotConfiguredError,
    ShapeAlreadyExistsError,
)
from domain.shapes import Cube, Cylinder, Shape

__all__ = [
    "Cube",
    "Cylinder",
    "DimensionValidationError",
    "GeometryError",
    "InvalidArgumentError",
    "RepositoryNotConfiguredError",
    "Shape",
    "ShapeAlreadyExistsError",
]
