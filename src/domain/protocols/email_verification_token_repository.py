"""EmailVerificationTokenRepository protocol (port).

Token Lifecycle:
    1. Issued at registration or on resend (older tokens for the user are
       purged first, so at most one is outstanding)
    2. Looked up by token string during verification
    3. Deleted once consumed (single use), in the same commit as the
       user update

Implementations:
    - EmailVerificationTokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID


@dataclass
class EmailVerificationTokenData:
    """Token data returned to the application layer (no ORM models)."""

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``expires_at`` has passed."""
        return self.expires_at <= (now or datetime.now(UTC))


class EmailVerificationTokenRepository(Protocol):
    """Protocol for email verification token persistence."""

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> EmailVerificationTokenData:
        """Purge the user's outstanding tokens and store a new one atomically."""
        ...

    async def find_by_token(self, token: str) -> EmailVerificationTokenData | None:
        """Find a token by its string. Expiry is checked by the caller."""
        ...

    async def consume(self, token_id: UUID) -> bool:
        """Delete one token without committing.

        Returns:
            True if this call removed it; False if it was already consumed.
        """
        ...

    async def delete_expired_tokens(self) -> int:
        """Remove expired tokens. Returns the number deleted."""
        ...
