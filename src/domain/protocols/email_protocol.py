"""EmailProtocol - Port for email service implementations.

Infrastructure layer provides concrete implementations (StubEmailService).
Delivery problems are the adapter's concern: callers in account flows do
not change their outcome based on email delivery.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        send_verification_email: Send email verification link
        send_password_reset_email: Send password reset link
        send_password_changed_notification: Notify user of password change
    """

    async def send_verification_email(
        self,
        to_email: str,
        user_name: str,
        verification_url: str,
    ) -> None:
        """Send email verification link to user.

        Args:
            to_email: Recipient email address.
            user_name: Recipient display name.
            verification_url: Full URL with verification token.
        """
        ...

    async def send_password_reset_email(
        self,
        to_email: str,
        user_name: str,
        reset_url: str,
    ) -> None:
        """Send password reset link to user.

        Args:
            to_email: Recipient email address.
            user_name: Recipient display name.
            reset_url: Full URL with password reset token.
        """
        ...

    async def send_password_changed_notification(
        self,
        to_email: str,
        user_name: str,
    ) -> None:
        """Send security notification that the password was changed."""
        ...
