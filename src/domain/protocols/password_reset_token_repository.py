"""PasswordResetTokenRepository protocol (port).

Token Lifecycle:
    1. Issued by forgot-password (older tokens for the user are purged)
    2. Looked up by token string during reset
    3. All of the user's reset tokens are deleted once one is consumed,
       in the same commit as the password update

Implementations:
    - PasswordResetTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID


@dataclass
class PasswordResetTokenData:
    """Token data returned to the application layer (no ORM models)."""

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``expires_at`` has passed."""
        return self.expires_at <= (now or datetime.now(UTC))


class PasswordResetTokenRepository(Protocol):
    """Protocol for password reset token persistence."""

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> PasswordResetTokenData:
        """Purge the user's outstanding tokens and store a new one atomically."""
        ...

    async def find_by_token(self, token: str) -> PasswordResetTokenData | None:
        """Find a token by its string. Expiry is checked by the caller."""
        ...

    async def consume(self, token_id: UUID, user_id: UUID) -> bool:
        """Delete the token and the user's other reset tokens without committing.

        Returns:
            True if this call removed ``token_id``; False if it was already
            consumed.
        """
        ...

    async def delete_expired_tokens(self) -> int:
        """Remove expired tokens. Returns the number deleted."""
        ...
