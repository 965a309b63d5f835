"""Password reset token database model.

Security:
    - token: Random 32-byte hex string (unguessable)
    - expires_at: short lifetime (60 minutes by default)
    - Single use: all of the user's reset tokens are deleted on reset
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class PasswordResetToken(BaseMutableModel):
    """Password reset token model.

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "password_reset_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who requested the reset",
    )

    token: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Random reset token (hex string)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when token expires",
    )

    def __repr__(self) -> str:
        """String representation for debugging (token value omitted)."""
        return (
            f"<PasswordResetToken(id={self.id}, user_id={self.user_id}, "
            f"expires_at={self.expires_at})>"
        )
