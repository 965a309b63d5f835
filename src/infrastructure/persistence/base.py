"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for mutable models (combines above)
- ensure_utc: Normalizes datetimes read back from the database

Domain entities never inherit from these classes; repositories map
between ORM models and domain dataclasses.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── User
            ├── Role
            ├── Permission
            ├── EmailVerificationToken
            └── PasswordResetToken

The generic Uuid and DateTime(timezone=True) types keep the models
portable between PostgreSQL (production) and SQLite (tests).
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes.

    SQLite drops tzinfo on round-trip; PostgreSQL returns aware values,
    which pass through unchanged.
    """
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (time-ordered UUIDv7, generated client-side)
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
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        Use BaseMutableModel instead of mixing TimestampMixin + BaseModel
        manually; the MRO order matters.
    """

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

    Provides:
        - id: UUID primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True
