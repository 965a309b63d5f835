"""Delete role handler (settings/roles).

Holders are collected before the delete; once the join rows are gone
there is no way to find them.
"""

from src.application.commands.role_commands import DeleteRole
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import SUPERUSER_ROLE
from src.domain.protocols import IdentityCache, LoggerProtocol, RoleRepository


class DeleteRoleHandler:
    """Handler for delete role command."""

    def __init__(
        self,
        role_repo: RoleRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._role_repo = role_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: DeleteRole) -> Result[None, ApplicationError]:
        role = await self._role_repo.find_by_id(cmd.role_id)
        if role is None:
            return Failure(
                error=not_found_error(ErrorCode.ROLE_NOT_FOUND, "Role", str(cmd.role_id))
            )
        if role.is_superuser:
            return Failure(
                error=validation_error(
                    ErrorCode.RESERVED_ROLE_NAME,
                    f"The role '{SUPERUSER_ROLE}' cannot be deleted",
                    field="name",
                )
            )

        holder_ids = await self._role_repo.holder_ids(role.id)
        await self._role_repo.delete(role.id)
        await self._identity_cache.invalidate_many(holder_ids)

        self._logger.info(
            "role_deleted", role_id=str(role.id), invalidated=len(holder_ids)
        )
        return Success(value=None)
