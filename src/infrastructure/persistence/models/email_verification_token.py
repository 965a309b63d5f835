"""Email verification token database model.

Security:
    - token: Random 32-byte hex string (unguessable)
    - expires_at: configurable lifetime (24 hours by default)
    - Single use: the row is deleted once the token is consumed
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EmailVerificationToken(BaseMutableModel):
    """Email verification token model.

    Token Lifecycle:
        1. Created on registration or resend (user's older tokens purged)
        2. Sent to user's email
        3. Consumed: user verified, token row deleted

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "email_verification_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who needs to verify their email",
    )

    token: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Random verification token (hex string)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Timestamp when token expires",
    )

    def __repr__(self) -> str:
        """String representation for debugging (token value omitted)."""
        return (
            f"<EmailVerificationToken(id={self.id}, user_id={self.user_id}, "
            f"expires_at={self.expires_at})>"
        )
