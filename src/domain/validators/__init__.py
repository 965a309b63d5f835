"""Validators package exports."""

from src.domain.validators.functions import (
    validate_email,
    validate_name,
    validate_strong_password,
    validate_token_format,
)

__all__ = [
    "validate_email",
    "validate_name",
    "validate_strong_password",
    "validate_token_format",
]
