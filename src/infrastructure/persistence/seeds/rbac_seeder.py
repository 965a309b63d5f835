"""RBAC graph and bootstrap account seeder.

Seeds the reserved superuser role, the admin role, every built-in
"{group} {action}" permission, and grants all of them to admin. Then
creates one verified account per role. Idempotent via existence checks,
safe to run on every startup.

After initial seeding, all role/permission changes should be managed
via the settings APIs.
"""

from datetime import UTC, datetime

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.enums import (
    PermissionAction,
    PermissionGroup,
    UserRole,
    UserStatus,
    permission_name,
)
from src.domain.protocols import PasswordHashingProtocol
from src.infrastructure.persistence.models import Permission, Role, User

logger = structlog.get_logger(__name__)

# (email, display name, role). Passwords must be rotated after first login.
DEFAULT_USERS: list[tuple[str, str, UserRole]] = [
    ("superuser@example.com", "Superuser", UserRole.SUPERUSER),
    ("admin@example.com", "Admin", UserRole.ADMIN),
]
DEFAULT_PASSWORD = "Password123!"


async def _get_or_create_role(session: AsyncSession, name: str) -> tuple[Role, bool]:
    role = await session.scalar(select(Role).where(Role.name == name))
    if role is not None:
        return role, False
    role = Role(name=name, permissions=[])
    session.add(role)
    await session.flush()
    return role, True


async def seed_rbac(session: AsyncSession) -> None:
    """Seed built-in roles and permissions. Idempotent.

    Seeds:
        - superuser role (never holds permissions)
        - admin role
        - One permission per PermissionGroup x PermissionAction
        - admin granted every built-in permission

    Args:
        session: Async database session. Committed on success.
    """
    seeded_count = 0
    skipped_count = 0

    await _get_or_create_role(session, UserRole.SUPERUSER.value)
    admin, _ = await _get_or_create_role(session, UserRole.ADMIN.value)

    existing = {
        permission.name: permission
        for permission in (await session.scalars(select(Permission))).all()
    }

    permissions: list[Permission] = []
    for group in PermissionGroup:
        for action in PermissionAction:
            name = permission_name(group, action)
            permission = existing.get(name)
            if permission is None:
                permission = Permission(name=name, group=group.value)
                session.add(permission)
                seeded_count += 1
            else:
                skipped_count += 1
            permissions.append(permission)

    await session.flush()

    granted = {permission.name for permission in admin.permissions}
    admin.permissions.extend(p for p in permissions if p.name not in granted)

    await session.commit()

    logger.info(
        "rbac_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(permissions),
    )


async def seed_users(
    session: AsyncSession,
    password_service: PasswordHashingProtocol,
) -> None:
    """Seed verified bootstrap accounts bound to their roles. Idempotent.

    Requires seed_rbac to have run first.

    Args:
        session: Async database session. Committed on success.
        password_service: Hashes the default password.
    """
    created = 0

    for email, name, role_name in DEFAULT_USERS:
        exists = await session.scalar(
            select(User.id).where(
                func.lower(User.email) == email,
                User.deleted_at.is_(None),
            )
        )
        if exists is not None:
            continue

        role = await session.scalar(select(Role).where(Role.name == role_name.value))
        if role is None:
            logger.warning("seed_role_missing", role=role_name.value, email=email)
            continue

        session.add(
            User(
                name=name,
                email=email,
                password_hash=password_service.hash_password(DEFAULT_PASSWORD),
                status=UserStatus.ACTIVE,
                email_verified_at=datetime.now(UTC),
                roles=[role],
            )
        )
        created += 1

    await session.commit()

    logger.info("user_seeding_complete", created=created, total=len(DEFAULT_USERS))
