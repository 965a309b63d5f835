"""Reset password handler.

Flow:
1. Check password confirmation
2. Find token, check not expired
3. Find the owning user
4. Consume the user's reset tokens (fails if a concurrent reset won)
5. Hash and store the new password; one commit covers steps 4-5
6. Invalidate the cached identity
7. Send password changed notification
"""

from src.application.commands.auth_commands import ResetPassword
from src.application.errors import ApplicationError, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import (
    EmailProtocol,
    IdentityCache,
    LoggerProtocol,
    PasswordHashingProtocol,
    PasswordResetTokenRepository,
    UserRepository,
)


class ResetPasswordHandler:
    """Handler for reset password command."""

    def __init__(
        self,
        user_repo: UserRepository,
        reset_token_repo: PasswordResetTokenRepository,
        password_service: PasswordHashingProtocol,
        identity_cache: IdentityCache,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._reset_token_repo = reset_token_repo
        self._password_service = password_service
        self._identity_cache = identity_cache
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[None, ApplicationError]:
        """Handle reset password command.

        Returns:
            Success(None), or Failure(ApplicationError) with field
            ``password_confirmation`` or ``token``.
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

        invalid_token = Failure(
            error=validation_error(
                ErrorCode.TOKEN_INVALID,
                AccountError.INVALID_RESET_TOKEN,
                field="token",
            )
        )

        # Step 2: Token
        token_data = await self._reset_token_repo.find_by_token(cmd.token)
        if token_data is None or token_data.is_expired():
            self._logger.info("password_reset_failed", reason="invalid_token")
            return invalid_token

        # Step 3: User
        user = await self._user_repo.find_by_id(token_data.user_id)
        if user is None:
            return invalid_token

        # Step 4: Consume every reset token of the user
        if not await self._reset_token_repo.consume(token_data.id, user.id):
            self._logger.info("password_reset_failed", reason="token_consumed")
            return invalid_token

        # Step 5: New password
        user.password_hash = self._password_service.hash_password(cmd.password)
        user = await self._user_repo.update(user)

        # Step 6: Invalidate
        await self._identity_cache.invalidate(user.id)

        self._logger.info("password_reset_completed", user_id=str(user.id))

        # Step 7: Notification
        try:
            await self._email_service.send_password_changed_notification(
                to_email=user.email, user_name=user.name
            )
        except Exception as e:
            self._logger.error(
                "password_changed_email_failed", error=e, user_id=str(user.id)
            )

        return Success(value=None)
