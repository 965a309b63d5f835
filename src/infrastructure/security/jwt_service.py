"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256 with a key of at least 256 bits
    - Claims: sub (user id), iat, exp, jti. Roles and permissions are
      never embedded; authorization always resolves them fresh.
    - Every failure (bad signature, expiry, malformed token, bad subject)
      is returned as a Failure, never raised.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import DecodeError, ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.constants import JWT_ALGORITHM, MIN_SECRET_KEY_BYTES
from src.core.result import Failure, Result, Success
from src.domain.errors import TokenError


class JWTService:
    """JWT access token generation and validation.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(user_id=user.id)

        match token_service.validate_access_token(token):
            case Success(value=user_id):
                ...
            case Failure(error=reason):
                ...
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 60 * 24,
        algorithm: str = JWT_ALGORITHM,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing (at least 32 bytes).
            expiration_minutes: Token lifetime in minutes.
            algorithm: HMAC algorithm name.

        Raises:
            ValueError: If secret_key is too short.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    def generate_access_token(self, user_id: UUID) -> str:
        """Generate a signed access token for ``user_id``.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(user_id=uuid7())
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[UUID, str]:
        """Validate a token and extract the user id.

        Returns:
            Success(user_id), or Failure with a TokenError constant.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(error=TokenError.EXPIRED_TOKEN)
        except DecodeError:
            return Failure(error=TokenError.MALFORMED_TOKEN)
        except InvalidTokenError:
            return Failure(error=TokenError.INVALID_TOKEN)

        subject = payload.get("sub")
        if not isinstance(subject, str):
            return Failure(error=TokenError.MISSING_SUBJECT)
        try:
            return Success(value=UUID(subject))
        except ValueError:
            return Failure(error=TokenError.MISSING_SUBJECT)
