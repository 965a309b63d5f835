"""User database model (credential store).

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email_verified_at: NULL until the email address is verified
    - deleted_at: soft delete; live rows have NULL

Email uniqueness is enforced among live users only (partial unique index
on lower(email) where deleted_at IS NULL), so a soft-deleted address can
register again.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, Index, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.domain.enums import UserStatus
from src.infrastructure.persistence.base import BaseMutableModel
from src.infrastructure.persistence.models.role import user_roles

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.role import Role


class User(BaseMutableModel):
    """User model for authentication and account management.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        name: Display name
        email: Email address (stored lowercase)
        password_hash: Bcrypt hashed password
        status: active | inactive | suspended | blocked
        email_verified_at: Verification timestamp (nullable)
        remark: Administrator note (nullable)
        deleted_at: Soft-delete timestamp (nullable)

    Relationships:
        - roles: Many-to-many through user_roles (cascade on delete)
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="User email address (lowercase, unique among live users)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    status: Mapped[UserStatus] = mapped_column(
        Enum(
            UserStatus,
            name="user_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=UserStatus.ACTIVE,
        server_default=UserStatus.ACTIVE.value,
        comment="Account lifecycle status (only active users authenticate)",
    )

    email_verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="When the email address was verified (NULL = unverified)",
    )

    remark: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Administrator note",
    )

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        index=True,
        comment="Soft-delete timestamp (NULL = live)",
    )

    roles: Mapped[list["Role"]] = relationship(
        secondary=user_roles,
        lazy="selectin",
        passive_deletes=True,
    )

    __table_args__ = (
        Index(
            "uq_users_email_live",
            func.lower(email),
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging (no password hash)."""
        return f"<User(id={self.id}, email={self.email}, status={self.status})>"
