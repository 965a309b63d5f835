"""Create role handler (settings/roles).

Flow:
1. Reject the reserved superuser name
2. Check role name uniqueness
3. Check every permission id exists
4. Insert role and permission rows in one transaction

No identity is invalidated: a new role has no holders.
"""

from src.application.commands.handlers._permission_ids import ensure_permissions_exist
from src.application.commands.role_commands import CreateRole
from src.application.errors import ApplicationError, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.enums import SUPERUSER_ROLE
from src.domain.protocols import LoggerProtocol, PermissionRepository, RoleRepository


class CreateRoleHandler:
    """Handler for create role command."""

    def __init__(
        self,
        role_repo: RoleRepository,
        permission_repo: PermissionRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._role_repo = role_repo
        self._permission_repo = permission_repo
        self._logger = logger

    async def handle(self, cmd: CreateRole) -> Result[Role, ApplicationError]:
        # Step 1: Reserved name
        if cmd.name.lower() == SUPERUSER_ROLE:
            return Failure(
                error=validation_error(
                    ErrorCode.RESERVED_ROLE_NAME,
                    f"The role name '{SUPERUSER_ROLE}' is reserved",
                    field="name",
                )
            )

        # Step 2: Name uniqueness
        if await self._role_repo.find_by_name(cmd.name) is not None:
            return Failure(
                error=validation_error(
                    ErrorCode.ROLE_ALREADY_EXISTS,
                    "Role name already exists",
                    field="name",
                )
            )

        # Step 3: Permissions
        match await ensure_permissions_exist(self._permission_repo, cmd.permission_ids):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=permission_ids):
                pass

        # Step 4: Save
        role = await self._role_repo.create(cmd.name, permission_ids)

        self._logger.info(
            "role_created", role_id=str(role.id), permission_count=len(permission_ids)
        )
        return Success(value=role)
