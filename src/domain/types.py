"""Annotated types with centralized validation.

Define validation once, use everywhere. Request schemas and commands
share these types.

Usage:
    from src.domain.types import Email, Password, VerificationToken

    class RegisterRequest(BaseModel):
        email: Email  # Validation included!
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_name,
    validate_strong_password,
    validate_token_format,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, trimmed and normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation (upper, lower, digit, special, 8+ chars)."""

LoginPassword = Annotated[
    str,
    Field(min_length=1, max_length=128, description="Password as typed at login"),
]
"""Password accepted at login or as a current password (no strength rules)."""

VerificationToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=255,
        description="Email verification or password reset token (hex)",
        examples=["9f86d081884c7d659a2feaa0c55ad015"],
    ),
    AfterValidator(validate_token_format),
]
"""Email verification or password reset token."""

Name = Annotated[
    str,
    Field(min_length=1, max_length=255, description="Display name"),
    AfterValidator(validate_name),
]
"""Trimmed, non-blank name (users, roles, permissions, groups)."""
