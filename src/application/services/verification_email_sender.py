"""Issues email verification tokens and sends the verification link.

Shared by registration, resend-verification and the administrator
"send verification email" action. Issuing purges the user's older tokens.
Delivery failures are logged and do not fail the calling flow.
"""

from src.domain.entities.user import User
from src.domain.protocols import (
    EmailProtocol,
    EmailVerificationTokenRepository,
    LoggerProtocol,
    SecureTokenProtocol,
)


class VerificationEmailSender:
    """Create a verification token for a user and email the link."""

    def __init__(
        self,
        token_repo: EmailVerificationTokenRepository,
        token_service: SecureTokenProtocol,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        client_url: str,
    ) -> None:
        self._token_repo = token_repo
        self._token_service = token_service
        self._email_service = email_service
        self._logger = logger
        self._client_url = client_url.rstrip("/")

    async def send(self, user: User) -> None:
        """Issue a fresh token for ``user`` and send the verification email."""
        token = self._token_service.generate_token()
        await self._token_repo.replace_for_user(
            user_id=user.id,
            token=token,
            expires_at=self._token_service.calculate_expiration(),
        )

        verification_url = f"{self._client_url}/verify-email?token={token}"
        try:
            await self._email_service.send_verification_email(
                to_email=user.email,
                user_name=user.name,
                verification_url=verification_url,
            )
        except Exception as e:
            self._logger.error(
                "verification_email_failed",
                error=e,
                user_id=str(user.id),
            )
            return

        self._logger.info("verification_email_queued", user_id=str(user.id))
