"""SQLAlchemy models for stored shapes.

Records are deliberately unvalidated: dimension columns accept zero and
negative values. Validation belongs to the domain shapes in domain.shapes.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from core.database import Base


def utcnow() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamp columns."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utcnow)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class CubeRecord(TimestampMixin, Base):
    """Stored cube."""

    __tablename__ = "cubes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    side_length: Mapped[int] = mapped_column(Integer, nullable=False)


class CylinderRecord(TimestampMixin, Base):
    """Stored cylinder."""

    __tablename__ = "cylinders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    radius: Mapped[int] = mapped_column(Integer, nullable=False)
    height: Mapped[int] = mapped_column(Integer, nullable=False)
