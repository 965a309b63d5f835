"""Delete permission handler (settings/permissions)."""

from src.application.commands.permission_commands import DeletePermission
from src.application.errors import ApplicationError, not_found_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import IdentityCache, LoggerProtocol, PermissionRepository


class DeletePermissionHandler:
    """Remove a permission from every role, then invalidate its holders."""

    def __init__(
        self,
        permission_repo: PermissionRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._permission_repo = permission_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: DeletePermission) -> Result[None, ApplicationError]:
        # Holders must be read while the role_permissions rows still exist
        holder_ids = await self._permission_repo.holder_ids(cmd.permission_id)

        if not await self._permission_repo.delete(cmd.permission_id):
            return Failure(
                error=not_found_error(
                    ErrorCode.PERMISSION_NOT_FOUND,
                    "Permission",
                    str(cmd.permission_id),
                )
            )

        await self._identity_cache.invalidate_many(holder_ids)

        self._logger.info(
            "permission_deleted",
            permission_id=str(cmd.permission_id),
            invalidated=len(holder_ids),
        )
        return Success(value=None)
