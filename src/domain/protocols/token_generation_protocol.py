"""Token generation protocol (port) for bearer tokens.

Tokens carry only the user id. Roles and permissions are never embedded,
so authorization always goes through the identity cache/resolver and
picks up invalidations immediately.

Implementations:
    - JWTService: src/infrastructure/security/jwt_service.py
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result


class TokenGenerationProtocol(Protocol):
    """Protocol for signing and verifying bearer tokens.

    Example:
        >>> token = token_service.generate_access_token(user_id=user.id)
        >>> match token_service.validate_access_token(token):
        ...     case Success(value=user_id):
        ...         ...
        ...     case Failure(error=_):
        ...         ...  # treat as unauthenticated
    """

    def generate_access_token(self, user_id: UUID) -> str:
        """Sign a token whose subject is ``user_id``.

        Args:
            user_id: Authenticated user's id.

        Returns:
            Encoded token string.
        """
        ...

    def validate_access_token(self, token: str) -> Result[UUID, str]:
        """Verify a token and return the user id it was issued for.

        Bad signature, malformed token, expired token and missing or
        malformed subject all produce Failure. Never raises.

        Args:
            token: Encoded token string.

        Returns:
            Success(user_id) or Failure(reason).
        """
        ...
