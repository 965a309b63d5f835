"""Centralized validation functions.

All validation logic defined once, reused everywhere via Annotated types
(see src/domain/types.py). Validators are pure functions that raise
ValueError on validation failure.
"""

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>_-+=[]\\/~`\';'


def validate_email(v: str) -> str:
    """Validate email format and normalize it.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email(" User@Example.COM ")
        'user@example.com'
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requirements:
        - At least 8 characters
        - At least one uppercase letter, one lowercase letter and one digit
        - At least one special character

    Raises:
        ValueError: If password doesn't meet requirements.
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if not any(c in _SPECIAL_CHARACTERS for c in v):
        raise ValueError("Password must contain special character")
    return v


def validate_token_format(v: str) -> str:
    """Validate verification/reset token format (hex string).

    Raises:
        ValueError: If token is empty or not hexadecimal.
    """
    v = v.strip()
    if not v:
        raise ValueError("Token cannot be empty")
    if not re.match(r"^[a-fA-F0-9]+$", v):
        raise ValueError("Token must be hexadecimal")
    return v


def validate_name(v: str) -> str:
    """Trim a display/role/permission name and reject blanks.

    Raises:
        ValueError: If the name is blank after trimming.
    """
    v = v.strip()
    if not v:
        raise ValueError("Name cannot be blank")
    return v
