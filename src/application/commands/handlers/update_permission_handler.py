"""Update permission handler (settings/permissions).

A rename changes the permission name in every holder's identity, so all
holders are invalidated after the commit.
"""

from src.application.commands.permission_commands import UpdatePermission
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.role import Permission
from src.domain.protocols import IdentityCache, LoggerProtocol, PermissionRepository


class UpdatePermissionHandler:
    """Handler for update permission command."""

    def __init__(
        self,
        permission_repo: PermissionRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._permission_repo = permission_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(
        self, cmd: UpdatePermission
    ) -> Result[Permission, ApplicationError]:
        permission = await self._permission_repo.find_by_id(cmd.permission_id)
        if permission is None:
            return Failure(
                error=not_found_error(
                    ErrorCode.PERMISSION_NOT_FOUND,
                    "Permission",
                    str(cmd.permission_id),
                )
            )

        clashing = await self._permission_repo.find_by_names([cmd.name])
        if any(p.id != permission.id for p in clashing):
            return Failure(
                error=validation_error(
                    ErrorCode.PERMISSION_ALREADY_EXISTS,
                    "Permission name already exists",
                    field="name",
                )
            )

        permission = await self._permission_repo.update(
            permission.id, cmd.name, cmd.group
        )

        holder_ids = await self._permission_repo.holder_ids(permission.id)
        await self._identity_cache.invalidate_many(holder_ids)

        self._logger.info(
            "permission_updated",
            permission_id=str(permission.id),
            invalidated=len(holder_ids),
        )
        return Success(value=permission)
