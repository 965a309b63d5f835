"""Administrator "resend verification email" handler (settings/users)."""

from src.application.commands.user_commands import SendUserVerificationEmail
from src.application.errors import ApplicationError, not_found_error, validation_error
from src.application.services import VerificationEmailSender
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import AccountError
from src.domain.protocols import UserRepository


class SendUserVerificationEmailHandler:
    """Issue a new verification link for an unverified user."""

    def __init__(
        self,
        user_repo: UserRepository,
        verification_sender: VerificationEmailSender,
    ) -> None:
        self._user_repo = user_repo
        self._verification_sender = verification_sender

    async def handle(
        self, cmd: SendUserVerificationEmail
    ) -> Result[None, ApplicationError]:
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=not_found_error(ErrorCode.USER_NOT_FOUND, "User", str(cmd.user_id))
            )

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
