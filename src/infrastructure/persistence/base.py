"""Declarative base and mixins for all database models.

This module provides:
- Base: Declarative root holding the shared metadata
- BaseModel: Base for models with a UUID primary key (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Recommended base for mutable models (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models in repositories

Architecture:
    Base (metadata)
        ├── BaseModel (id, created_at)
        │   └── BaseMutableModel (+ updated_at via TimestampMixin)
        │       └── UserModel
        │
        └── RememberMeTokenModel (series primary key, own timestamps)
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class Base(DeclarativeBase):
    """Declarative root. Alembic autogenerate reads ``Base.metadata``."""


class BaseModel(Base):
    """Base class for models identified by a UUID.

    Provides:
    - id: UUID v7 primary key (time-ordered, auto-generated)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides id, created_at and updated_at with the correct MRO.
    """

    __abstract__ = True


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from backends without timezones.

    SQLite drops tzinfo on ``DateTime(timezone=True)`` columns; PostgreSQL
    keeps it. Values are always written in UTC, so naive means UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
