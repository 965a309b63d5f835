"""Permission database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Permission(BaseMutableModel):
    """Permission model.

    Fields:
        name: Unique permission name (e.g. "user edit")
        group: Group label for UI grouping (e.g. "user")
    """

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique permission name",
    )

    group: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Group label for UI grouping",
    )
