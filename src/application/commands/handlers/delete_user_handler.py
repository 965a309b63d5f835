"""Delete user handler (soft delete, settings/users)."""

from src.application.commands.user_commands import DeleteUser
from src.application.errors import ApplicationError, not_found_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import IdentityCache, LoggerProtocol, UserRepository


class DeleteUserHandler:
    """Soft delete a user, then drop their cached identity."""

    def __init__(
        self,
        user_repo: UserRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, ApplicationError]:
        if not await self._user_repo.soft_delete(cmd.user_id):
            return Failure(
                error=not_found_error(ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id))
            )

        await self._identity_cache.invalidate(cmd.user_id)

        self._logger.info("user_deleted", user_id=str(cmd.user_id))
        return Success(value=None)
