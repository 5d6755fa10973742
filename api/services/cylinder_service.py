"""Cylinder service."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.shapes import Cylinder
from repositories.cylinder_repository import CylinderRepository
from services.shape_service import ShapeService


class CylinderService(ShapeService[Cylinder]):
    """Service for cylinder CRUD."""

    @classmethod
    def for_session(cls, db: AsyncSession) -> "CylinderService":
        return cls(CylinderRepository(db))
