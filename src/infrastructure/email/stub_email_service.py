"""Stub email service.

Logs outgoing emails (including their links) instead of delivering them.
Nothing is retained in memory.
"""

from src.domain.protocols import LoggerProtocol


class StubEmailService:
    """EmailProtocol implementation that logs instead of sending.

    Note: Does NOT inherit from EmailProtocol (uses structural typing).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_verification_email(
        self,
        to_email: str,
        user_name: str,
        verification_url: str,
    ) -> None:
        self._logger.info(
            "email_stub_verification",
            to_email=to_email,
            verification_url=verification_url,
        )

    async def send_password_reset_email(
        self,
        to_email: str,
        user_name: str,
        reset_url: str,
    ) -> None:
        self._logger.info(
            "email_stub_password_reset",
            to_email=to_email,
            reset_url=reset_url,
        )

    async def send_password_changed_notification(
        self,
        to_email: str,
        user_name: str,
    ) -> None:
        self._logger.info("email_stub_password_changed", to_email=to_email)
