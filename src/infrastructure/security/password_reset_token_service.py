"""Password reset token service.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - Short expiration (60 minutes by default)
    - All of the user's reset tokens are deleted after a successful reset
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.core.constants import TOKEN_BYTES


class PasswordResetTokenService:
    """Password reset token generation service."""

    def __init__(self, expiration_minutes: int = 60) -> None:
        self._expiration_minutes = expiration_minutes

    def generate_token(self) -> str:
        """Generate a 64-character hex token (256 bits of entropy)."""
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(minutes=self._expiration_minutes)
