"""Shape service: a facade over a shape repository.

Routes talk to services, never to repositories, so the repository's
session dependency stays out of the HTTP layer. The service adds no rules
of its own; every call keeps the repository's contract.
"""

from typing import Any
from uuid import UUID

from core.telemetry import track_operation
from domain.errors import RepositoryNotConfiguredError
from domain.shapes import Shape
from repositories.shape_repository import ShapeRepository


class ShapeService[S: Shape]:
    """Create, read, update and delete shapes of one type."""

    def __init__(self, repository: ShapeRepository[S, Any]):
        if repository is None:
            raise RepositoryNotConfiguredError(
                f"{type(self).__name__} requires a repository"
            )
        self._repository = repository

    @track_operation("shape.insert")
    async def insert(self, shape: S) -> UUID:
        """Store a new shape. Raises ShapeAlreadyExistsError on a duplicate ID."""
        return await self._repository.insert(shape)

    @track_operation("shape.read_by_id")
    async def read_by_id(self, shape_id: UUID) -> S | None:
        return await self._repository.read_by_id(shape_id)

    @track_operation("shape.update")
    async def update(self, shape: S) -> bool:
        """Replace the stored shape with the same ID. False if none is stored."""
        return await self._repository.update(shape)

    @track_operation("shape.delete")
    async def delete(self, shape_id: UUID) -> bool:
        return await self._repository.delete(shape_id)
