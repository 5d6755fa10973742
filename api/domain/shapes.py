"""Shape entities with validated dimensions.

Every shape type declares its dimension fields once in ``dimensions``; the
shared ``__setattr__`` runs the positive-integer check on construction and
on every later assignment, so an invalid shape can never exist in memory.
The id is fixed at construction.
"""

from typing import Any, ClassVar
from uuid import UUID, uuid4

from domain.errors import DimensionValidationError

# Largest value the INTEGER dimension columns hold on every supported store
MAX_DIMENSION = 2_147_483_647


def validate_dimension(shape_name: str, field: str, value: Any) -> int:
    """Return value if it is a positive int up to MAX_DIMENSION.

    Anything else raises DimensionValidationError.
    """
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise DimensionValidationError(shape_name, field, value)
    if value > MAX_DIMENSION:
        raise DimensionValidationError(
            shape_name, field, value, f"must not exceed {MAX_DIMENSION}"
        )
    return value


class Shape:
    """Base entity: an immutable UUID plus positive-integer dimensions."""

    dimensions: ClassVar[tuple[str, ...]] = ()

    def __init__(self, id: UUID | None = None, **values: int) -> None:
        unknown = sorted(set(values) - set(self.dimensions))
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected dimensions: {unknown}"
            )
        missing = [name for name in self.dimensions if name not in values]
        if missing:
            raise TypeError(f"{type(self).__name__} missing dimensions: {missing}")

        object.__setattr__(self, "_id", id if id is not None else uuid4())
        for name in self.dimensions:
            setattr(self, name, values[name])

    @property
    def id(self) -> UUID:
        return self._id

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_id":
            raise AttributeError(f"{type(self).__name__} id is read-only")
        if name in self.dimensions:
            value = validate_dimension(type(self).__name__, name, value)
        super().__setattr__(name, value)

    def dimension_values(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.dimensions}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id and (
            self.dimension_values() == other.dimension_values()
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.dimension_values().items())
        return f"{type(self).__name__}(id={self.id}, {fields})"


class Cube(Shape):
    """A cube with a single side length."""

    dimensions = ("side_length",)

    side_length: int

    def __init__(self, side_length: int, id: UUID | None = None) -> None:
        super().__init__(id, side_length=side_length)


class Cylinder(Shape):
    """A cylinder with a radius and a height."""

    dimensions = ("radius", "height")

    radius: int
    height: int

    def __init__(self, radius: int, height: int, id: UUID | None = None) -> None:
        super().__init__(id, radius=radius, height=height)
