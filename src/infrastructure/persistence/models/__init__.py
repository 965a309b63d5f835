"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and are never imported by the domain layer.

Models Organization:
    - user.py: User model (credential store)
    - role.py: Role model plus role_permissions / user_roles join tables
    - permission.py: Permission model
    - email_verification_token.py: Email verification token model
    - password_reset_token.py: Password reset token model

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are
    mapped to/from these models by the repository layer.
"""

from src.infrastructure.persistence.models.email_verification_token import (
    EmailVerificationToken,
)
from src.infrastructure.persistence.models.password_reset_token import (
    PasswordResetToken,
)
from src.infrastructure.persistence.models.permission import Permission
from src.infrastructure.persistence.models.role import (
    Role,
    role_permissions,
    user_roles,
)
from src.infrastructure.persistence.models.user import User

__all__ = [
    "EmailVerificationToken",
    "PasswordResetToken",
    "Permission",
    "Role",
    "User",
    "role_permissions",
    "user_roles",
]
