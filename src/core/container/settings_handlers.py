"""Settings handler dependency factories (users, roles, permissions).

Command handlers receive the identity cache so they can invalidate
affected identities after their writes commit. Query handlers only need
a repository.
"""

from fastapi import Depends

from src.application.commands.handlers.create_permissions_handler import (
    CreatePermissionsHandler,
)
from src.application.commands.handlers.create_role_handler import CreateRoleHandler
from src.application.commands.handlers.create_user_handler import CreateUserHandler
from src.application.commands.handlers.delete_permission_handler import (
    DeletePermissionHandler,
)
from src.application.commands.handlers.delete_role_handler import DeleteRoleHandler
from src.application.commands.handlers.delete_user_handler import DeleteUserHandler
from src.application.commands.handlers.send_user_verification_email_handler import (
    SendUserVerificationEmailHandler,
)
from src.application.commands.handlers.set_user_password_handler import (
    SetUserPasswordHandler,
)
from src.application.commands.handlers.update_permission_handler import (
    UpdatePermissionHandler,
)
from src.application.commands.handlers.update_role_handler import UpdateRoleHandler
from src.application.commands.handlers.update_user_handler import UpdateUserHandler
from src.application.queries.handlers import (
    GetPermissionHandler,
    GetRoleHandler,
    GetUserHandler,
    ListPermissionOptionsHandler,
    ListPermissionsHandler,
    ListRoleOptionsHandler,
    ListRolesHandler,
    ListUsersHandler,
)
from src.application.services import VerificationEmailSender
from src.core.container.infrastructure import (
    get_identity_cache,
    get_logger,
    get_password_service,
)
from src.core.container.repositories import (
    get_permission_repository,
    get_role_repository,
    get_user_repository,
)
from src.core.container.services import get_verification_email_sender
from src.domain.protocols import (
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    PermissionRepository,
    RoleRepository,
    UserRepository,
)

# ============================================================================
# Users
# ============================================================================


async def get_create_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    role_repo: RoleRepository = Depends(get_role_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    verification_sender: VerificationEmailSender = Depends(
        get_verification_email_sender
    ),
    logger: LoggerProtocol = Depends(get_logger),
) -> CreateUserHandler:
    """Get CreateUser command handler (request-scoped)."""
    return CreateUserHandler(
        user_repo=user_repo,
        role_repo=role_repo,
        password_service=password_service,
        verification_sender=verification_sender,
        logger=logger,
    )


async def get_update_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    role_repo: RoleRepository = Depends(get_role_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> UpdateUserHandler:
    """Get UpdateUser command handler (request-scoped)."""
    return UpdateUserHandler(
        user_repo=user_repo,
        role_repo=role_repo,
        identity_cache=identity_cache,
        logger=logger,
    )


async def get_delete_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> DeleteUserHandler:
    """Get DeleteUser command handler (request-scoped)."""
    return DeleteUserHandler(
        user_repo=user_repo, identity_cache=identity_cache, logger=logger
    )


async def get_set_user_password_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    password_service: PasswordHashingProtocol = Depends(get_password_service),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> SetUserPasswordHandler:
    """Get SetUserPassword command handler (request-scoped)."""
    return SetUserPasswordHandler(
        user_repo=user_repo,
        password_service=password_service,
        identity_cache=identity_cache,
        logger=logger,
    )


async def get_send_user_verification_email_handler(
    user_repo: UserRepository = Depends(get_user_repository),
    verification_sender: VerificationEmailSender = Depends(
        get_verification_email_sender
    ),
) -> SendUserVerificationEmailHandler:
    """Get SendUserVerificationEmail command handler (request-scoped)."""
    return SendUserVerificationEmailHandler(
        user_repo=user_repo, verification_sender=verification_sender
    )


async def get_list_users_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersHandler:
    """Get ListUsers query handler (request-scoped)."""
    return ListUsersHandler(user_repo=user_repo)


async def get_get_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserHandler:
    """Get GetUser query handler (request-scoped)."""
    return GetUserHandler(user_repo=user_repo)


# ============================================================================
# Roles
# ============================================================================


async def get_create_role_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
    permission_repo: PermissionRepository = Depends(get_permission_repository),
    logger: LoggerProtocol = Depends(get_logger),
) -> CreateRoleHandler:
    """Get CreateRole command handler (request-scoped)."""
    return CreateRoleHandler(
        role_repo=role_repo, permission_repo=permission_repo, logger=logger
    )


async def get_update_role_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
    permission_repo: PermissionRepository = Depends(get_permission_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> UpdateRoleHandler:
    """Get UpdateRole command handler (request-scoped)."""
    return UpdateRoleHandler(
        role_repo=role_repo,
        permission_repo=permission_repo,
        identity_cache=identity_cache,
        logger=logger,
    )


async def get_delete_role_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> DeleteRoleHandler:
    """Get DeleteRole command handler (request-scoped)."""
    return DeleteRoleHandler(
        role_repo=role_repo, identity_cache=identity_cache, logger=logger
    )


async def get_list_roles_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
) -> ListRolesHandler:
    """Get ListRoles query handler (request-scoped)."""
    return ListRolesHandler(role_repo=role_repo)


async def get_get_role_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
) -> GetRoleHandler:
    """Get GetRole query handler (request-scoped)."""
    return GetRoleHandler(role_repo=role_repo)


async def get_list_role_options_handler(
    role_repo: RoleRepository = Depends(get_role_repository),
) -> ListRoleOptionsHandler:
    """Get ListRoleOptions query handler (request-scoped)."""
    return ListRoleOptionsHandler(role_repo=role_repo)


# ============================================================================
# Permissions
# ============================================================================


async def get_create_permissions_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
    logger: LoggerProtocol = Depends(get_logger),
) -> CreatePermissionsHandler:
    """Get CreatePermissions command handler (request-scoped)."""
    return CreatePermissionsHandler(permission_repo=permission_repo, logger=logger)


async def get_update_permission_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> UpdatePermissionHandler:
    """Get UpdatePermission command handler (request-scoped)."""
    return UpdatePermissionHandler(
        permission_repo=permission_repo, identity_cache=identity_cache, logger=logger
    )


async def get_delete_permission_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
    identity_cache: IdentityCache = Depends(get_identity_cache),
    logger: LoggerProtocol = Depends(get_logger),
) -> DeletePermissionHandler:
    """Get DeletePermission command handler (request-scoped)."""
    return DeletePermissionHandler(
        permission_repo=permission_repo, identity_cache=identity_cache, logger=logger
    )


async def get_list_permissions_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
) -> ListPermissionsHandler:
    """Get ListPermissions query handler (request-scoped)."""
    return ListPermissionsHandler(permission_repo=permission_repo)


async def get_get_permission_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
) -> GetPermissionHandler:
    """Get GetPermission query handler (request-scoped)."""
    return GetPermissionHandler(permission_repo=permission_repo)


async def get_list_permission_options_handler(
    permission_repo: PermissionRepository = Depends(get_permission_repository),
) -> ListPermissionOptionsHandler:
    """Get ListPermissionOptions query handler (request-scoped)."""
    return ListPermissionOptionsHandler(permission_repo=permission_repo)
