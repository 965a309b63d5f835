"""SecureTokenProtocol - port for single-use emailed tokens.

Implementations:
    - EmailVerificationTokenService: src/infrastructure/security/
    - PasswordResetTokenService: src/infrastructure/security/
"""

from datetime import datetime
from typing import Protocol


class SecureTokenProtocol(Protocol):
    """Generates unguessable tokens and their expiry."""

    def generate_token(self) -> str:
        """Random hex token."""
        ...

    def calculate_expiration(self) -> datetime:
        """UTC expiry for a token issued now."""
        ...
