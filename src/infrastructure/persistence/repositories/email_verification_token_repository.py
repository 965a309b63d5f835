"""EmailVerificationTokenRepository - SQLAlchemy implementation for email verification token persistence.

At most one token is outstanding per user: issuing a new one purges the
previous ones in the same transaction. Consuming a token deletes it in the
transaction that marks the user verified.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.email_verification_token_repository import (
    EmailVerificationTokenData,
)
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)


def _to_data(model: EmailVerificationToken) -> EmailVerificationTokenData:
    """Convert database model to domain DTO."""
    return EmailVerificationTokenData(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        expires_at=ensure_utc(model.expires_at),  # type: ignore[arg-type]
    )


class EmailVerificationTokenRepository:
    """SQLAlchemy implementation for email verification token persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EmailVerificationTokenRepository(session)
        ...     token = await repo.find_by_token("abc123...")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> EmailVerificationTokenData:
        """Purge the user's tokens and store a new one.

        Args:
            user_id: User's unique identifier.
            token: Random hex token (64 characters).
            expires_at: Token expiration timestamp.

        Returns:
            Created EmailVerificationTokenData.
        """
        await self.session.execute(
            delete(EmailVerificationToken).where(
                EmailVerificationToken.user_id == user_id
            )
        )
        token_model = EmailVerificationToken(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
        )
        self.session.add(token_model)
        await self.session.commit()
        return _to_data(token_model)

    async def find_by_token(self, token: str) -> EmailVerificationTokenData | None:
        """Find email verification token by token string.

        Returns:
            EmailVerificationTokenData if found, None otherwise. Expiry is
            checked by the caller.
        """
        result = await self.session.execute(
            select(EmailVerificationToken).where(EmailVerificationToken.token == token)
        )
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def consume(self, token_id: UUID) -> bool:
        """Delete a token inside the caller's transaction (no commit).

        The user update that follows commits the deletion. When two
        requests race on the same token, the second DELETE waits for the
        first commit and then matches no row.

        Returns:
            True if this call removed the token, False if it was already gone.
        """
        result = await self.session.execute(
            delete(EmailVerificationToken).where(EmailVerificationToken.id == token_id)
        )
        return (result.rowcount or 0) == 1

    async def delete_expired_tokens(self) -> int:
        """Delete expired email verification tokens.

        Returns:
            Number of tokens deleted.
        """
        result = await self.session.execute(
            delete(EmailVerificationToken).where(
                EmailVerificationToken.expires_at < datetime.now(UTC)
            )
        )
        await self.session.commit()
        return result.rowcount or 0
