"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.email_verification_token_repository import (
    EmailVerificationTokenRepository,
)
from src.infrastructure.persistence.repositories.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from src.infrastructure.persistence.repositories.permission_repository import (
    PermissionRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "EmailVerificationTokenRepository",
    "PasswordResetTokenRepository",
    "PermissionRepository",
    "RoleRepository",
    "UserRepository",
]
