"""Conversion between domain shapes and their stored records.

A mapper is the only path between the two representations. The field set
comes from the shape type's ``dimensions``, so one generic mapper serves
every shape.
"""

from dataclasses import dataclass

from core.database import Base
from domain.errors import InvalidArgumentError
from domain.shapes import Cube, Cylinder, Shape
from models import CubeRecord, CylinderRecord


@dataclass(frozen=True)
class ShapeMapper[S: Shape, R: Base]:
    """Stateless bidirectional mapper for one shape type."""

    shape_type: type[S]
    record_type: type[R]

    @property
    def fields(self) -> tuple[str, ...]:
        return self.shape_type.dimensions

    def to_record(self, shape: S | None) -> R:
        """Copy id and dimensions verbatim into a new, unsaved record."""
        if shape is None:
            raise InvalidArgumentError("shape")

        return self.record_type(
            id=shape.id,
            **{field: getattr(shape, field) for field in self.fields},
        )

    def to_domain(self, record: R | None) -> S:
        """Build a shape from a record.

        Goes through the shape constructor, so a record holding a
        non-positive dimension raises DimensionValidationError.
        """
        if record is None:
            raise InvalidArgumentError("record")

        return self.shape_type(
            id=record.id,
            **{field: getattr(record, field) for field in self.fields},
        )

    def apply(self, shape: S | None, record: R | None) -> R:
        """Overwrite the record's dimensions with the shape's values."""
        if shape is None:
            raise InvalidArgumentError("shape")
        if record is None:
            raise InvalidArgumentError("record")

        for field in self.fields:
            setattr(record, field, getattr(shape, field))
        return record


CUBE_MAPPER: ShapeMapper[Cube, CubeRecord] = ShapeMapper(Cube, CubeRecord)
CYLINDER_MAPPER: ShapeMapper[Cylinder, CylinderRecord] = ShapeMapper(
    Cylinder, CylinderRecord
)
