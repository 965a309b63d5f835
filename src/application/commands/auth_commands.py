"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
- Annotated types document the validation applied by request schemas
"""

from dataclasses import dataclass

from src.domain.types import Email, LoginPassword, Name, Password, VerificationToken


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Creates an active, unverified user and emails a verification link.
    The user cannot log in until the email is verified.

    Example:
        >>> command = RegisterUser(
        ...     name="Jane",
        ...     email="jane@example.com",
        ...     password="SecurePass123!",
        ... )
        >>> result = await handler.handle(command)
    """

    name: Name
    email: Email
    password: Password


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Exchange email and password for a bearer token plus identity."""

    email: Email
    password: LoginPassword


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Consume an email verification token."""

    token: VerificationToken


@dataclass(frozen=True, kw_only=True)
class ResendVerificationEmail:
    """Issue a fresh verification token for an unverified account.

    Unknown emails succeed silently so the endpoint does not reveal which
    addresses are registered.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ForgotPassword:
    """Email a password reset link (silent success for unknown emails)."""

    email: Email


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Set a new password using a reset token.

    Attributes:
        token: Password reset token from the emailed link.
        password: New password (strength validated).
        password_confirmation: Must equal password.
    """

    token: VerificationToken
    password: Password
    password_confirmation: str
