"""Generic shape repository for database operations.

One implementation serves every shape type; CubeRepository and
CylinderRepository bind it to their mapper. Repositories flush but never
commit: the request-scoped session in core.database owns the transaction.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from core.logger import get_logger
from core.wide_event import set_wide_event_fields
from domain.errors import (
    InvalidArgumentError,
    RepositoryNotConfiguredError,
    ShapeAlreadyExistsError,
)
from domain.shapes import Shape
from repositories.mappers import ShapeMapper
from repositories.utils import log_slow_query

logger = get_logger(__name__)


class ShapeRepository[S: Shape, R: Base]:
    """Repository for one shape type's records."""

    def __init__(self, db: AsyncSession, mapper: ShapeMapper[S, R]):
        if db is None:
            raise RepositoryNotConfiguredError(
                f"{type(self).__name__} requires a database session"
            )
        if mapper is None:
            raise RepositoryNotConfiguredError(
                f"{type(self).__name__} requires a shape mapper"
            )
        self.db = db
        self.mapper = mapper

    @property
    def shape_name(self) -> str:
        return self.mapper.shape_type.__name__

    async def _get_record(self, shape_id: UUID) -> R | None:
        record_type = self.mapper.record_type
        result = await self.db.execute(
            select(record_type).where(record_type.id == shape_id)
        )
        return result.scalar_one_or_none()

    def _log_change(self, event: str, shape_id: UUID) -> None:
        set_wide_event_fields(shape_type=self.shape_name, shape_id=str(shape_id))
        logger.info(event, shape_type=self.shape_name, shape_id=str(shape_id))

    @log_slow_query("shape.read_by_id")
    async def read_by_id(self, shape_id: UUID) -> S | None:
        """Get a shape by ID, or None if it is not stored."""
        record = await self._get_record(shape_id)
        if record is None:
            return None
        return self.mapper.to_domain(record)

    @log_slow_query("shape.insert")
    async def insert(self, shape: S) -> UUID:
        """Store a new shape and return its ID.

        Create-only: an existing ID raises ShapeAlreadyExistsError and the
        stored record is left as it was.
        """
        if shape is None:
            raise InvalidArgumentError("shape")

        if await self._get_record(shape.id) is not None:
            raise ShapeAlreadyExistsError(self.shape_name, shape.id)

        self.db.add(self.mapper.to_record(shape))
        await self.db.flush()

        self._log_change("shape.inserted", shape.id)
        return shape.id

    @log_slow_query("shape.update")
    async def update(self, shape: S) -> bool:
        """Replace a stored shape's dimensions with the given shape's values.

        Returns False when no record has that ID; update never inserts.
        """
        if shape is None:
            raise InvalidArgumentError("shape")

        record = await self._get_record(shape.id)
        if record is None:
            return False

        self.mapper.apply(shape, record)
        await self.db.flush()

        self._log_change("shape.updated", shape.id)
        return True

    @log_slow_query("shape.delete")
    async def delete(self, shape_id: UUID) -> bool:
        """Delete a shape by ID. Returns False when nothing was stored."""
        record = await self._get_record(shape_id)
        if record is None:
            return False

        await self.db.delete(record)
        await self.db.flush()

        self._log_change("shape.deleted", shape_id)
        return True
