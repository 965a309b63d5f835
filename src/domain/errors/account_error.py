"""Account flow error messages.

User-facing messages for registration, login, verification, password
and profile flows. Handlers wrap them in ValidationError (422) with the
offending field.
"""


class AccountError:
    """Account error message constants (not exceptions)."""

    EMAIL_ALREADY_EXISTS = "Email already exists"
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_NOT_VERIFIED = "Email not verified"
    ACCOUNT_NOT_ACTIVE = "Your account is not active. Please contact administrator."
    EMAIL_ALREADY_VERIFIED = "Email already verified"
    INVALID_VERIFICATION_TOKEN = "Invalid or expired verification token"
    INVALID_RESET_TOKEN = "Invalid or expired password reset token"
    CURRENT_PASSWORD_INCORRECT = "Current password is incorrect"
    AUTHENTICATION_REQUIRED = "Authentication required"
