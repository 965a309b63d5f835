"""Domain protocols (ports) package.

This package contains protocol definitions that the application layer
needs. Infrastructure adapters implement these protocols without
inheritance.

Usage:
    from src.domain.protocols import IdentityCache, UserRepository
"""

# Service protocols
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.identity_cache_protocol import (
    IdentityCache,
    IdentityCacheError,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.secure_token_protocol import SecureTokenProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.email_verification_token_repository import (
    EmailVerificationTokenData,
    EmailVerificationTokenRepository,
)
from src.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)
from src.domain.protocols.permission_repository import PermissionRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "CacheProtocol",
    "EmailProtocol",
    "IdentityCache",
    "IdentityCacheError",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SecureTokenProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "EmailVerificationTokenData",
    "EmailVerificationTokenRepository",
    "PasswordResetTokenData",
    "PasswordResetTokenRepository",
    "PermissionRepository",
    "RoleRepository",
    "UserRepository",
]
