"""Email verification handler.

Flow:
1. Find token by token string
2. Check token exists and is not expired
3. Find the owning user
4. Consume the token (fails if a concurrent request already did)
5. Mark the user verified and save; one commit covers steps 4-5
6. Invalidate the cached identity
7. Return Success(user)
"""

from src.application.commands.auth_commands import VerifyEmail
from src.application.errors import ApplicationError, validation_error
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import AccountError
from src.domain.protocols import (
    EmailVerificationTokenRepository,
    IdentityCache,
    LoggerProtocol,
    UserRepository,
)


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(
        self,
        user_repo: UserRepository,
        verification_token_repo: EmailVerificationTokenRepository,
        identity_cache: IdentityCache,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._verification_token_repo = verification_token_repo
        self._identity_cache = identity_cache
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[User, ApplicationError]:
        """Handle email verification command.

        Returns:
            Success(User) once verified, or Failure(ApplicationError) with
            field ``token`` for unknown or expired tokens.
        """
        invalid_token = Failure(
            error=validation_error(
                ErrorCode.TOKEN_INVALID,
                AccountError.INVALID_VERIFICATION_TOKEN,
                field="token",
            )
        )

        # Step 1-2: Token lookup and expiry
        token_data = await self._verification_token_repo.find_by_token(cmd.token)
        if token_data is None or token_data.is_expired():
            self._logger.info(
                "email_verification_failed",
                reason="token_not_found" if token_data is None else "token_expired",
            )
            return invalid_token

        # Step 3: Owning user
        user = await self._user_repo.find_by_id(token_data.user_id)
        if user is None:
            return invalid_token

        # Step 4: Consume token
        if not await self._verification_token_repo.consume(token_data.id):
            self._logger.info("email_verification_failed", reason="token_consumed")
            return invalid_token

        # Step 5: Mark verified
        user.mark_email_verified()
        user = await self._user_repo.update(user)

        # Step 6: Invalidate
        await self._identity_cache.invalidate(user.id)

        self._logger.info("email_verified", user_id=str(user.id))
        return Success(value=user)
