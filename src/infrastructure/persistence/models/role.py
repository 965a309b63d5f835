"""Role and permission database models (RBAC graph).

Tables:
    roles              - unique role names
    permissions        - unique permission names with a group label
    role_permissions   - (role_id, permission_id) composite PK
    user_roles         - (user_id, role_id) composite PK, assigned_at

Join rows cascade when either parent row is deleted.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.permission import Permission


role_permissions = Table(
    "role_permissions",
    BaseModel.metadata,
    Column(
        "role_id",
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        Uuid,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)

user_roles = Table(
    "user_roles",
    BaseModel.metadata,
    Column(
        "user_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
    Column(
        "assigned_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)


class Role(BaseMutableModel):
    """Role model.

    Fields:
        name: Unique role name ("superuser" is the reserved sentinel)

    Relationships:
        - permissions: Many-to-many through role_permissions
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique role name",
    )

    permissions: Mapped[list["Permission"]] = relationship(
        secondary=role_permissions,
        lazy="selectin",
        order_by="Permission.name",
    )
