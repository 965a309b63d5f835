"""Change own password handler.

Flow:
1. Check password confirmation
2. Load the user and verify the current password
3. Hash and store the new password
4. Invalidate the cached identity
5. Send password changed notification
"""

from src.application.commands.profile_commands import ChangePassword
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import (
    EmailProtocol,
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class ChangePasswordHandler:
    """Handler for change password command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        identity_cache: IdentityCache,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._identity_cache = identity_cache
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: ChangePassword) -> Result[None, ApplicationError]:
        """Handle change password command.

        Returns:
            Success(None), or Failure(ApplicationError) with field
            ``password_confirmation`` or ``current_password``.
        """
        # Step 1: Confirmation
        if cmd.password != cmd.password_confirmation:
            return Failure(
                error=validation_error(
                    ErrorCode.PASSWORD_MISMATCH,
                    "Password confirmation does not match",
                    field="password_confirmation",
                )
            )

        # Step 2: Current password
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=not_found_error(ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id))
            )
        if not self._password_service.verify_password(
            cmd.current_password, user.password_hash
        ):
            return Failure(
                error=validation_error(
                    ErrorCode.INVALID_PASSWORD,
                    AccountError.CURRENT_PASSWORD_INCORRECT,
                    field="current_password",
                )
            )

        # Step 3: Store
        user.password_hash = self._password_service.hash_password(cmd.password)
        await self._user_repo.update(user)

        # Step 4: Invalidate
        await self._identity_cache.invalidate(user.id)

        self._logger.info("password_changed", user_id=str(user.id))

        # Step 5: Notification
        try:
            await self._email_service.send_password_changed_notification(
                to_email=user.email, user_name=user.name
            )
        except Exception as e:
            self._logger.error(
                "password_changed_email_failed", error=e, user_id=str(user.id)
            )

        return Success(value=None)
