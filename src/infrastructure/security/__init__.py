"""Security infrastructure adapters.

- Password hashing (bcrypt)
- JWT access token generation/validation
- Email verification and password reset token generation (hex tokens)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.email_verification_token_service import (
    EmailVerificationTokenService,
)
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.password_reset_token_service import (
    PasswordResetTokenService,
)

__all__ = [
    "BcryptPasswordService",
    "EmailVerificationTokenService",
    "JWTService",
    "PasswordResetTokenService",
]
