"""Exceptions raised by the shape domain, repositories and services.

Not-found is never an exception: lookups return None and mutations return
False so callers can map it to a 404 without try/except.
"""

from uuid import UUID


class GeometryError(Exception):
    """Base class for all shape errors."""


class DimensionValidationError(GeometryError, ValueError):
    """A dimension was not a positive integer."""

    def __init__(
        self,
        shape_name: str,
        field: str,
        value: object,
        reason: str = "must be a positive integer",
    ) -> None:
        self.shape_name = shape_name
        self.field = field
        self.value = value
        super().__init__(f"{shape_name} {field} {reason}, got {value!r}")


class InvalidArgumentError(GeometryError, ValueError):
    """A required shape or record argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class ShapeAlreadyExistsError(GeometryError):
    """Insert was called with an id that is already stored."""

    def __init__(self, shape_name: str, shape_id: UUID) -> None:
        self.shape_name = shape_name
        self.shape_id = shape_id
        super().__init__(
            f"{shape_name} {shape_id} already exists. "
            "Please update this entity instead."
        )


class RepositoryNotConfiguredError(GeometryError, RuntimeError):
    """A service or repository was built without its collaborator."""
