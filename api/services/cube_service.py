"""Cube service."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.shapes import Cube
from repositories.cube_repository import CubeRepository
from services.shape_service import ShapeService


class CubeService(ShapeService[Cube]):
    """Service for cube CRUD."""

    @classmethod
    def for_session(cls, db: AsyncSession) -> "CubeService":
        return cls(CubeRepository(db))
