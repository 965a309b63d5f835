"""Password hashing protocol (port).

Credential storage keeps only salted hashes. Implementations:
    - BcryptPasswordService: src/infrastructure/security/bcrypt_password_service.py
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Protocol for password hashing services."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Salted hash suitable for storage.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            True on match. False on mismatch or malformed hash, never raises.
        """
        ...
