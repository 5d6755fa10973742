"""Cylinder repository for database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.shapes import Cylinder
from models import CylinderRecord
from repositories.mappers import CYLINDER_MAPPER
from repositories.shape_repository import ShapeRepository


class CylinderRepository(ShapeRepository[Cylinder, CylinderRecord]):
    """Repository for Cylinder database operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, CYLINDER_MAPPER)
