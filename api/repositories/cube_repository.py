"""Cube repository for database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.shapes import Cube
from models import CubeRecord
from repositories.mappers import CUBE_MAPPER
from repositories.shape_repository import ShapeRepository


class CubeRepository(ShapeRepository[Cube, CubeRecord]):
    """Repository for Cube database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, CUBE_MAPPER)
