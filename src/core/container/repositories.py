"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
Repositories commit their own writes, so a handler that returns a
response has already persisted everything it changed.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        EmailVerificationTokenRepository,
        PasswordResetTokenRepository,
        PermissionRepository,
        RoleRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Usage:
        @router.get("/users/{user_id}")
        async def get_user(
            user_repo: UserRepository = Depends(get_user_repository)
        ):
            return await user_repo.find_by_id(user_id)
    """
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_role_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RoleRepository":
    """Get role repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import RoleRepository

    return RoleRepository(session=session)


async def get_permission_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PermissionRepository":
    """Get permission repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import PermissionRepository

    return PermissionRepository(session=session)


async def get_email_verification_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EmailVerificationTokenRepository":
    """Get email verification token repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import (
        EmailVerificationTokenRepository,
    )

    return EmailVerificationTokenRepository(session=session)


async def get_password_reset_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "PasswordResetTokenRepository":
    """Get password reset token repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import (
        PasswordResetTokenRepository,
    )

    return PasswordResetTokenRepository(session=session)
