"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol. The cost factor comes from settings
(bcrypt_rounds, 10-20; 12 is roughly 250ms per hash).
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Each +1 doubles hashing time.

        Raises:
            ValueError: If cost_factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt, 60-character result).

        Example:
            >>> service = BcryptPasswordService(cost_factor=12)
            >>> service.hash_password("SecurePass123!") != service.hash_password("SecurePass123!")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if the password matches. False for a mismatch or a hash
            that is not bcrypt format (never raises).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
