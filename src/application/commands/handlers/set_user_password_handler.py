"""Administrator password reset handler (settings/users)."""

from src.application.commands.user_commands import SetUserPassword
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class SetUserPasswordHandler:
    """Set a user's password without the current one."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: SetUserPassword) -> Result[None, ApplicationError]:
        if cmd.password != cmd.password_confirmation:
            return Failure(
                error=validation_error(
                    ErrorCode.PASSWORD_MISMATCH,
                    "Password confirmation does not match",
                    field="password_confirmation",
                )
            )

        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=not_found_error(ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id))
            )

        user.password_hash = self._password_service.hash_password(cmd.password)
        await self._user_repo.update(user)
        await self._identity_cache.invalidate(user.id)

        self._logger.info("user_password_set", user_id=str(user.id))
        return Success(value=None)
