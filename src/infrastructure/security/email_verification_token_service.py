"""Email verification token service.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - Configurable expiration (24 hours by default)
    - Single use (row deleted on consumption)
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.core.constants import TOKEN_BYTES


class EmailVerificationTokenService:
    """Email verification token generation service.

    Usage:
        service = EmailVerificationTokenService(expiration_hours=24)
        token = service.generate_token()
        await email_verification_repo.replace_for_user(
            user_id=user.id,
            token=token,
            expires_at=service.calculate_expiration(),
        )
    """

    def __init__(self, expiration_hours: int = 24) -> None:
        self._expiration_hours = expiration_hours

    def generate_token(self) -> str:
        """Generate a 64-character hex token (256 bits of entropy)."""
        return secrets.token_hex(TOKEN_BYTES)

    def calculate_expiration(self) -> datetime:
        """Expiration timestamp (UTC) for a token issued now."""
        return datetime.now(UTC) + timedelta(hours=self._expiration_hours)
