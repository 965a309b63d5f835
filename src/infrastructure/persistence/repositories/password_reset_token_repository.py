"""PasswordResetTokenRepository - SQLAlchemy implementation for password reset token persistence.

Issuing a token purges the user's older ones; a successful reset deletes
all of them in the transaction that stores the new password.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenData,
)
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)


def _to_data(model: PasswordResetToken) -> PasswordResetTokenData:
    """Convert database model to domain DTO."""
    return PasswordResetTokenData(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        expires_at=ensure_utc(model.expires_at),  # type: ignore[arg-type]
    )


class PasswordResetTokenRepository:
    """SQLAlchemy implementation for password reset token persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> PasswordResetTokenData:
        """Purge the user's reset tokens and store a new one."""
        await self.session.execute(
            delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id)
        )
        token_model = PasswordResetToken(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
        )
        self.session.add(token_model)
        await self.session.commit()
        return _to_data(token_model)

    async def find_by_token(self, token: str) -> PasswordResetTokenData | None:
        """Find password reset token by token string (expiry checked by caller)."""
        result = await self.session.execute(
            select(PasswordResetToken).where(PasswordResetToken.token == token)
        )
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def consume(self, token_id: UUID, user_id: UUID) -> bool:
        """Delete the presented token and the rest of the user's reset tokens.

        Runs inside the caller's transaction (no commit); the password
        update that follows commits it.

        Returns:
            True if this call removed the presented token, False if a
            concurrent reset already consumed it.
        """
        consumed = await self.session.execute(
            delete(PasswordResetToken).where(PasswordResetToken.id == token_id)
        )
        if (consumed.rowcount or 0) != 1:
            return False

        await self.session.execute(
            delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id)
        )
        return True

    async def delete_expired_tokens(self) -> int:
        """Delete expired reset tokens.

        Returns:
            Number of tokens deleted.
        """
        result = await self.session.execute(
            delete(PasswordResetToken).where(
                PasswordResetToken.expires_at < datetime.now(UTC)
            )
        )
        await self.session.commit()
        return result.rowcount or 0
