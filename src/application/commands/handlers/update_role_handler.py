"""Update role handler (settings/roles).

Flow:
1. Load the role (404); the superuser sentinel is not editable
2. Reject renaming to the reserved name
3. Check name uniqueness excluding the role itself
4. Check every permission id exists
5. Rename and replace the permission set in one transaction
6. Invalidate the cached identity of every holder
"""

from src.application.commands.handlers._permission_ids import ensure_permissions_exist
from src.application.commands.role_commands import UpdateRole
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Role
from src.domain.enums import SUPERUSER_ROLE
from src.domain.protocols import (
    IdentityCache,
    LoggerProtocol,
    PermissionRepository,
    RoleRepository,
)


class UpdateRoleHandler:
    """Handler for update role command."""

    def __init__(
        self,
        role_repo: RoleRepository,
        permission_repo: PermissionRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._role_repo = role_repo
        self._permission_repo = permission_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: UpdateRole) -> Result[Role, ApplicationError]:
        # Step 1: Load
        role = await self._role_repo.find_by_id(cmd.role_id)
        if role is None:
            return Failure(
                error=not_found_error(ErrorCode.ROLE_NOT_FOUND, "Role", str(cmd.role_id))
            )

        # Step 2: Reserved name
        if role.is_superuser or cmd.name.lower() == SUPERUSER_ROLE:
            return Failure(
                error=validation_error(
                    ErrorCode.RESERVED_ROLE_NAME,
                    f"The role name '{SUPERUSER_ROLE}' is reserved",
                    field="name",
                )
            )

        # Step 3: Name uniqueness
        existing = await self._role_repo.find_by_name(cmd.name)
        if existing is not None and existing.id != role.id:
            return Failure(
                error=validation_error(
                    ErrorCode.ROLE_ALREADY_EXISTS,
                    "Role name already exists",
                    field="name",
                )
            )

        # Step 4: Permissions
        match await ensure_permissions_exist(self._permission_repo, cmd.permission_ids):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=permission_ids):
                pass

        # Step 5: Save
        role = await self._role_repo.update(role.id, cmd.name, permission_ids)

        # Step 6: Invalidate holders
        holder_ids = await self._role_repo.holder_ids(role.id)
        await self._identity_cache.invalidate_many(holder_ids)

        self._logger.info(
            "role_updated", role_id=str(role.id), invalidated=len(holder_ids)
        )
        return Success(value=role)
