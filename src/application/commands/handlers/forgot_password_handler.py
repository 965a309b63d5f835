"""Forgot password handler.

Flow:
1. Look up user by email
2. If user not found: return Success (no user enumeration)
3. Purge the user's reset tokens and store a new one
4. Send password reset email (failures logged, flow still succeeds)
5. Return Success
"""

from src.application.commands.auth_commands import ForgotPassword
from src.application.errors import ApplicationError
from src.core.result import Result, Success
from src.domain.protocols import (
    EmailProtocol,
    LoggerProtocol,
    PasswordResetTokenRepository,
    SecureTokenProtocol,
    UserRepository,
)


class ForgotPasswordHandler:
    """Handler for forgot password command."""

    def __init__(
        self,
        user_repo: UserRepository,
        reset_token_repo: PasswordResetTokenRepository,
        token_service: SecureTokenProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        client_url: str,
    ) -> None:
        self._user_repo = user_repo
        self._reset_token_repo = reset_token_repo
        self._token_service = token_service
        self._email_service = email_service
        self._logger = logger
        self._client_url = client_url.rstrip("/")

    async def handle(self, cmd: ForgotPassword) -> Result[None, ApplicationError]:
        """Handle forgot password command.

        Returns:
            Always Success(None).
        """
        # Step 1-2: Lookup (silent for unknown emails)
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.info("password_reset_request_skipped", reason="unknown_email")
            return Success(value=None)

        # Step 3: Issue token
        token = self._token_service.generate_token()
        await self._reset_token_repo.replace_for_user(
            user_id=user.id,
            token=token,
            expires_at=self._token_service.calculate_expiration(),
        )

        # Step 4: Email
        try:
            await self._email_service.send_password_reset_email(
                to_email=user.email,
                user_name=user.name,
                reset_url=f"{self._client_url}/reset-password?token={token}",
            )
        except Exception as e:
            self._logger.error(
                "password_reset_email_failed", error=e, user_id=str(user.id)
            )
            return Success(value=None)

        self._logger.info("password_reset_requested", user_id=str(user.id))
        return Success(value=None)
