"""Resend verification email handler.

Unknown emails return Success without doing anything so the endpoint
does not reveal which addresses are registered. Already verified
accounts get a 422.
"""

from src.application.commands.auth_commands import ResendVerificationEmail
from src.application.errors import ApplicationError, validation_error
from src.application.services import VerificationEmailSender
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import LoggerProtocol, UserRepository


class ResendVerificationEmailHandler:
    """Handler for resend verification email command."""

    def __init__(
        self,
        user_repo: UserRepository,
        verification_sender: VerificationEmailSender,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._verification_sender = verification_sender
        self._logger = logger

    async def handle(
        self, cmd: ResendVerificationEmail
    ) -> Result[None, ApplicationError]:
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            self._logger.info("verification_resend_skipped", reason="unknown_email")
            return Success(value=None)

        if user.is_verified:
            return Failure(
                error=validation_error(
                    ErrorCode.EMAIL_ALREADY_VERIFIED,
                    AccountError.EMAIL_ALREADY_VERIFIED,
                    field="email",
                )
            )

        await self._verification_sender.send(user)
        return Success(value=None)
